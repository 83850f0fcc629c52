# storefront/utils/retry.py
import requests
from redis.exceptions import ConnectionError as RedisConnectionError, TimeoutError as RedisTimeoutError
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def is_transient_http_error(exc: BaseException) -> bool:
    """
    Blad przejsciowy serwisu autoryzacji: brak polaczenia, timeout albo 5xx.
    4xx jest trwaly - ponowienie zwroci to samo.
    """
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return True
    if isinstance(exc, requests.HTTPError):
        return exc.response is not None and exc.response.status_code >= 500
    return False


def _log_retry(retry_state):
    logger.warning(
        f"Retrying {retry_state.fn.__qualname__} "
        f"(attempt {retry_state.attempt_number}): {retry_state.outcome.exception()}"
    )


def http_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception(is_transient_http_error),
        before_sleep=_log_retry,
    )


def redis_retry():
    #tylko bledy polaczenia, ResponseError (np. blad skryptu lua) nie zniknie po ponowieniu
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception(lambda e: isinstance(e, (RedisConnectionError, RedisTimeoutError))),
        before_sleep=_log_retry,
    )
