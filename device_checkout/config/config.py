"""Configuration settings for the Device Checkout sheets relay."""

import os
from dotenv import load_dotenv

load_dotenv()

# --- Google Sheets Configuration ---
SHEETS_API_URL = 'https://sheets.googleapis.com/v4/spreadsheets'
# Columns A-E hold the five checkout fields, in order
SHEET_RANGE = 'Sheet1!A:E'
VALUE_INPUT_OPTION = 'USER_ENTERED'
# Google API Scopes needed
SCOPES = ['https://www.googleapis.com/auth/spreadsheets']
# Used when the service account JSON omits token_uri
GOOGLE_TOKEN_URI = 'https://oauth2.googleapis.com/token'

# --- Relay Endpoint ---
SHEETS_ENDPOINT_PATH = '/api/sheets'
CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, POST, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type',
}
PORT = int(os.getenv('PORT', '3001'))

# --- Client Service Configuration ---
# Base URL of the relay the client talks to
CHECKOUT_API_URL = os.getenv('CHECKOUT_API_URL', 'http://localhost:3001')
# 'relay' (service account behind the relay) or 'direct' (API key)
CHECKOUT_CLIENT_MODE = os.getenv('CHECKOUT_CLIENT_MODE', 'relay')
GOOGLE_SHEETS_API_KEY = os.getenv('GOOGLE_SHEETS_API_KEY', '')

# Outbound HTTP timeout in seconds. Unset means no timeout.
_timeout = os.getenv('SHEETS_REQUEST_TIMEOUT')
SHEETS_REQUEST_TIMEOUT = float(_timeout) if _timeout else None
