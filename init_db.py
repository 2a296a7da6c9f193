#!/usr/bin/env python3
"""
Database initialization script
Creates the activities table and checks that the database answers.
"""

import sys

from sqlalchemy import text

from app.core.database import Base, engine, SessionLocal
from app import models  # noqa: F401  registers the tables on Base


def init_db():
    """Create all database tables"""
    print("Creating database tables...")
    try:
        Base.metadata.create_all(bind=engine)
        print("Database tables created successfully")

        # Test database connection
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            print("Database connection test successful")
        finally:
            db.close()

    except Exception as e:
        print(f"Error creating database tables: {e}")
        return False

    return True


if __name__ == "__main__":
    if init_db():
        print("Database initialization completed successfully!")
    else:
        print("Database initialization failed!")
        sys.exit(1)
