# storefront/services/auth_client.py
import requests

from storefront.domain.schemas import UserIdentity
from storefront.utils.retry import http_retry
from storefront.utils.settings import AUTH_URL, AUTH_API_KEY, AUTH_TIMEOUT_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

#token odrzucony przez serwis autoryzacji = brak uzytkownika, nie blad
_UNAUTHORIZED = (401, 403)


class AuthClient:
    """
    Klient zewnetrznego serwisu autoryzacji.
    -pobranie uzytkownika dla tokenu sesji
    -wylogowanie (uniewaznienie tokenu)
    """

    def __init__(self, base_url: str | None = None, api_key: str | None = None, timeout: int | None = None):
        self.base_url = (base_url or AUTH_URL).rstrip("/")
        self.api_key = AUTH_API_KEY if api_key is None else api_key
        self.timeout = timeout or AUTH_TIMEOUT_SECONDS

    def _headers(self, token: str) -> dict:
        headers = {"Authorization": f"Bearer {token}"}
        if self.api_key:
            headers["apikey"] = self.api_key
        return headers

    @http_retry()
    def fetch_user(self, token: str) -> UserIdentity | None:
        url = f"{self.base_url}/user"
        logger.info(f"AuthClient GET {url}")

        resp = requests.get(url, headers=self._headers(token), timeout=self.timeout)
        if resp.status_code in _UNAUTHORIZED:
            logger.info("Session token rejected by auth service")
            return None

        resp.raise_for_status()
        data = resp.json()
        return UserIdentity(id=str(data["id"]), email=data.get("email"))

    @http_retry()
    def sign_out(self, token: str) -> None:
        url = f"{self.base_url}/logout"
        logger.info(f"AuthClient POST {url}")

        resp = requests.post(url, headers=self._headers(token), timeout=self.timeout)
        if resp.status_code in _UNAUTHORIZED:
            #sesja juz wygasla
            return

        resp.raise_for_status()
