"""Library configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


ANONYMOUS_DESCRIPTION = "<anonymous predicate>"


class LambspecSettings(BaseSettings):
    """Settings that shape failure messages and result recording.

    Loads from environment variables automatically:
        LAMBSPEC_ANONYMOUS_DESCRIPTION, LAMBSPEC_MAX_VALUE_LENGTH,
        LAMBSPEC_RECORD_RESULTS

    Attributes
    ----------
    anonymous_description
        Description reported for predicates that cannot describe themselves
        (lambdas, plain callable objects).
    max_value_length
        Truncate the ``subject`` recorded on a ``CheckResult`` when longer
        than this, appending ``...``. Raised failure messages always carry
        the full value. ``None`` disables truncation.
    record_results
        Whether checks append a ``CheckResult`` to an active collector.
    """

    anonymous_description: str = Field(
        default=ANONYMOUS_DESCRIPTION,
        min_length=1,
        description="Placeholder description for anonymous predicates",
    )
    max_value_length: int | None = Field(
        default=None,
        gt=3,
        description="Maximum length of a formatted value in failure messages",
    )
    record_results: bool = Field(
        default=True,
        description="Append check results to the active collector",
    )

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="LAMBSPEC_",
    )


@lru_cache(maxsize=1)
def get_settings() -> LambspecSettings:
    """Return the process-wide settings, read once from the environment."""
    return LambspecSettings()


def reset_settings() -> None:
    """Forget cached settings so the next lookup re-reads the environment."""
    get_settings.cache_clear()
