import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from migrations.create_tables import create_tables
from migrations.seed.seed_users import seed_users

if __name__ == "__main__":
    create_tables()
    seed_users()
