import json
from unittest.mock import MagicMock

import requests
from googleapiclient.discovery import build
from googleapiclient.http import HttpMockSequence

CLIENT_ID = "client-id-4f1c.apps.googleusercontent.com"
CLIENT_SECRET = "GOCSPX-client-secret-9a7b"
REFRESH_TOKEN = "1//refresh-token-0c2d"
ACCESS_TOKEN = "ya29.access-token-77e1"
FOLDER_URL = "https://drive.google.com/drive/folders/1AbCdEf"


def http_response(status_code, payload=None, text=None):
    r = requests.Response()
    r.status_code = status_code
    r.encoding = "utf-8"
    body = text if text is not None else json.dumps(payload or {})
    r._content = body.encode("utf-8")
    return r


def token_session(status_code=200, payload=None, text=None):
    session = MagicMock(spec=requests.Session)
    if payload is None and text is None and status_code == 200:
        payload = {"access_token": ACCESS_TOKEN, "expires_in": 3599, "token_type": "Bearer"}
    session.post.return_value = http_response(status_code, payload, text)
    return session


def drive_mock(*responses):
    """Drive v3 resource answering from (status, body) pairs, offline."""
    http = HttpMockSequence([({"status": str(status)}, body) for status, body in responses])
    return build("drive", "v3", http=http, cache_discovery=False, static_discovery=True)


def folder_created(url=FOLDER_URL, folder_id="1AbCdEf"):
    return 200, json.dumps({"id": folder_id, "webViewLink": url})


def authorized_drive(*responses):
    """Drive v3 resource built the production way, over an offline transport."""
    from gdrive import drive_service

    http = HttpMockSequence([({"status": str(status)}, body) for status, body in responses])
    return drive_service(ACCESS_TOKEN, http=http)
