# gdrive_oauth_bootstrap.py — one-time consent flow that stores the refresh token
import os
import pathlib

from google_auth_oauthlib.flow import InstalledAppFlow

from config import BASE_DIR, token_file_path

SCOPES = ["https://www.googleapis.com/auth/drive.file"]


def main():
    client_secrets = pathlib.Path(os.getenv("GOOGLE_OAUTH_CLIENT_FILE", "client_secret.json"))
    if not client_secrets.is_absolute():
        client_secrets = BASE_DIR / client_secrets
    if not client_secrets.exists():
        raise SystemExit(f"{client_secrets} not found (download the OAuth client JSON first).")

    flow = InstalledAppFlow.from_client_secrets_file(str(client_secrets), SCOPES)
    # offline + consent so Google always returns a refresh token
    creds = flow.run_local_server(port=0, access_type="offline", prompt="consent")

    token_path = token_file_path()
    token_path.write_text(creds.to_json(), encoding="utf-8")
    print(f"OAuth OK. Authorized-user token written to {token_path} (keep it out of version control).")


if __name__ == "__main__":
    main()
