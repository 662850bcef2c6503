import os

from pydantic import BaseModel, Field, PositiveFloat, PositiveInt

from ._utils.constants import (
    CONTENT_TYPE_JSON,
    ENV_FOLLOW_REDIRECTS,
    ENV_MAX_WORKERS,
    ENV_TIMEOUT,
    ENV_VERIFY_SSL,
    HEADER_ACCEPT,
    HEADER_USER_AGENT,
    USER_AGENT,
)

_FALSY = {"0", "false", "no", "off"}


def _default_headers() -> dict[str, str]:
    return {HEADER_ACCEPT: CONTENT_TYPE_JSON, HEADER_USER_AGENT: USER_AGENT}


class ClientConfig(BaseModel):
    """Settings for the shared transport and worker pool."""

    timeout: PositiveFloat = 30.0
    follow_redirects: bool = True
    verify_ssl: bool = True
    max_workers: PositiveInt = 4
    default_headers: dict[str, str] = Field(default_factory=_default_headers)

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """Build a config from ``APIKIT_*`` environment variables.

        Explicit keyword arguments win over the environment.
        """
        values: dict[str, object] = {}
        if timeout := os.getenv(ENV_TIMEOUT):
            values["timeout"] = timeout
        if max_workers := os.getenv(ENV_MAX_WORKERS):
            values["max_workers"] = max_workers
        if (follow := os.getenv(ENV_FOLLOW_REDIRECTS)) is not None:
            values["follow_redirects"] = follow.strip().lower() not in _FALSY
        if (verify := os.getenv(ENV_VERIFY_SSL)) is not None:
            values["verify_ssl"] = verify.strip().lower() not in _FALSY
        values.update(overrides)
        return cls.model_validate(values)
