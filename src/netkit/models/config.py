"""Pydantic configuration models for netkit."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field


class ByteSize(int):
    """
    Custom type that parses human-readable byte sizes.

    Accepts:
        - Integers (bytes)
        - Strings like '200kb', '1mb', '5gb'

    Examples:
        >>> ByteSize._parse('200kb')
        204800
        >>> ByteSize._parse(1024)
        1024
    """

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> Any:
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(cls._parse)

    @classmethod
    def _parse(cls, v: Any) -> int:
        if isinstance(v, int) and not isinstance(v, bool):
            return v
        if isinstance(v, str):
            v = v.lower().strip()
            # Order matters: check longer suffixes first
            units = [("gb", 1024**3), ("mb", 1024**2), ("kb", 1024), ("b", 1)]
            for unit, mult in units:
                if v.endswith(unit):
                    num_str = v[: -len(unit)].strip()
                    try:
                        return int(float(num_str) * mult)
                    except ValueError as err:
                        raise ValueError(f"Invalid number in byte size: {v}") from err
            try:
                return int(v)
            except ValueError:
                pass
        raise ValueError(f"Invalid byte size: {v}. Use format like '200kb', '1mb', or integer bytes.")


def _expand_env_var(value: Optional[str]) -> Optional[str]:
    """Expand environment variable references in a string.

    Supports $VAR and ${VAR} syntax. Returns original value if
    the env var is not set.
    """
    import os
    import re

    if value is None:
        return None

    pattern = r"\$\{([^}]+)\}|\$([A-Za-z_][A-Za-z0-9_]*)"

    def replace(match: re.Match) -> str:
        var_name = match.group(1) or match.group(2)
        return os.environ.get(var_name, match.group(0))

    return re.sub(pattern, replace, value)


class TransportConfig(BaseModel):
    """Configuration for the aiohttp transport.

    Header values support environment variable expansion using $VAR or
    ${VAR} syntax, so secrets can stay out of config files:
        TransportConfig(headers={"Authorization": "Bearer $API_TOKEN"})
    """

    timeout: float = Field(30.0, gt=0, description="Total request timeout in seconds")
    user_agent: Optional[str] = Field(None, description="Custom User-Agent header")
    proxy: Optional[str] = Field(None, description="Proxy URL (http:// or https://)")
    max_content_size: ByteSize = Field(
        ByteSize(50 * 1024 * 1024),
        description="Maximum response size (e.g., '200kb', '10mb')",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers sent with every request; request headers take precedence",
    )

    model_config = {"extra": "forbid"}

    def model_post_init(self, __context: object) -> None:
        """Expand environment variables in header values after init."""
        expanded = {name: _expand_env_var(value) or "" for name, value in self.headers.items()}
        object.__setattr__(self, "headers", expanded)


class ClientConfig(BaseModel):
    """Configuration for HttpClient behaviour."""

    empty_body: Literal["accept", "reject"] = Field(
        "accept",
        description=(
            "How to treat successful responses without content: 'accept' returns them "
            "as-is, 'reject' reports InvalidDataError"
        ),
    )

    model_config = {"extra": "forbid"}
