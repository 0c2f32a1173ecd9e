import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma-separated list of frontend origins allowed by CORS and Socket.IO
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173,http://localhost:5174,http://127.0.0.1:5174',
        ).split(',')
        if origin.strip()
    ]
    # Rounds per game; a game also ends early once every active board is full
    TOTAL_ROUNDS = int(os.environ.get('TOTAL_ROUNDS', '20'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
