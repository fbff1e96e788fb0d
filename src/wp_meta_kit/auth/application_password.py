"""WordPress application password authentication."""

import base64


class ApplicationPasswordAuth:
    """HTTP Basic authentication with a WordPress application password.

    Application passwords are generated per user under Users > Profile and
    are accepted by the REST API over HTTPS.
    """

    def __init__(self, username: str, password: str) -> None:
        self.username = username
        # WordPress displays application passwords in groups of four
        self.password = password.replace(" ", "")

    def get_headers(self) -> dict[str, str]:
        """Return the Authorization header."""
        token = base64.b64encode(f"{self.username}:{self.password}".encode()).decode("ascii")
        return {"Authorization": f"Basic {token}"}

    def validate_credentials(self) -> bool:
        """Check that both username and password are present."""
        return bool(self.username and self.username.strip() and self.password)
