# start.py

import sys
import os

# Asegura que la raíz del proyecto esté en el path (imports "src.*")
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.main import main

if __name__ == "__main__":
    main()
