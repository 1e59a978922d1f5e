import os
from dotenv import load_dotenv

# Only load the .env file if we're not on Render (i.e., we are in a local environment)
if os.environ.get("RENDER") != "true":
    load_dotenv()

# Flask Configuration
SECRET_KEY = os.getenv('SECRET_KEY', 'a_very_secret_key_that_should_be_changed')
CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

# Socket.IO Configuration
SOCKETIO_ASYNC_MODE = os.getenv('SOCKETIO_ASYNC_MODE', 'eventlet')

# Phase delays (seconds)
QUESTION_DELAY_SEC = float(os.getenv('QUESTION_DELAY_SEC', '4'))
BID_ITEM_DELAY_SEC = float(os.getenv('BID_ITEM_DELAY_SEC', '3'))

# Empty room reaping (seconds)
ROOM_REAP_GRACE_SEC = int(os.getenv('ROOM_REAP_GRACE_SEC', '300'))
ROOM_REAP_INTERVAL_SEC = int(os.getenv('ROOM_REAP_INTERVAL_SEC', '60'))

# Server Configuration
PORT = int(os.getenv('PORT', 3000))
DEBUG = os.environ.get('RENDER', '') != 'true'

# Render Configuration
IS_RENDER = os.environ.get("RENDER", "") == "true"
