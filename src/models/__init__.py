# src/models/__init__.py

from src.models.team import Team
from src.models.player import Player, MANAGED_PASSWORD
from src.models.player_number import PlayerNumber
from src.models.affiliation import Affiliation
from src.models.payment import Payment
from src.models.admin import Admin
from src.models.season import Season
from src.models.stats import Stats

# Nombre de tabla -> modelo, para el gateway
TABLES = {
    model.__tablename__: model
    for model in (Team, Player, PlayerNumber, Affiliation, Payment, Admin, Season, Stats)
}
