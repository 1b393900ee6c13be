# ecotrack/db/base_class.py

from sqlalchemy.orm import declarative_base

# Every ORM model in the project inherits from this class.
Base = declarative_base()
