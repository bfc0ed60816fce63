# src/services/league_services.py
# Un ResourceService por tabla; el orden por defecto replica el de cada listado.

from src.services.resource_service import ResourceService

team_service = ResourceService("team", "Team")
player_service = ResourceService("player", "Player", order_by="player_name", ascending=True)
player_number_service = ResourceService(
    "player_number", "Player number", order_by="player_number", ascending=True
)
affiliation_service = ResourceService("affiliations", "Affiliation")
payment_service = ResourceService("payments", "Payment record")
admin_service = ResourceService("admin", "Admin")
season_service = ResourceService("season", "Season")
stats_service = ResourceService("stats", "Stats")
