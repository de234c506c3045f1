import os

class Config:
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///leaderboard.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # CORS policy for browser clients (read by Flask-CORS)
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    CORS_METHODS = ['GET', 'POST']
    CORS_ALLOW_HEADERS = '*'
    CORS_SEND_WILDCARD = CORS_ORIGINS == '*'
    # Attempts at the read/compare/write cycle before a submit gives up with 409
    SUBMIT_MAX_RETRIES = int(os.environ.get('SUBMIT_MAX_RETRIES', '3'))
