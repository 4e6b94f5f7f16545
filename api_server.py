"""
HealthHub REST API server.
Run: python api_server.py   (needs DB_URI in the environment or .env)
"""

from healthhub.api.app import main


if __name__ == "__main__":
    main()
