"""Application settings and configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from domain.entities import MatchWindow
from domain.enums import LossMode, OutputMode, Region
from domain.errors import ConfigurationError

ENV_PATH = Path(__file__).resolve().parent / '.env'

DEFAULT_START_DATE = '2024-10-01'


def _required(env: Mapping[str, str], key: str) -> str:
    value = env.get(key, '').strip()
    if not value:
        raise ConfigurationError(key)
    return value


def _int(env: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(key, '').strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(key, f"{key} must be an integer, got {raw!r}") from None


def _float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key, '').strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(key, f"{key} must be a number, got {raw!r}") from None


def _date(env: Mapping[str, str], key: str, default: Optional[str]) -> Optional[datetime]:
    raw = env.get(key, '').strip() or default
    if not raw:
        return None
    try:
        # naive local midnight -> aware local datetime
        return datetime.strptime(raw, '%Y-%m-%d').astimezone()
    except ValueError:
        raise ConfigurationError(key, f"{key} must be YYYY-MM-DD, got {raw!r}") from None


def _choice(env: Mapping[str, str], key: str, default: str, parse) -> Any:
    raw = env.get(key, '').strip() or default
    try:
        return parse(raw)
    except ValueError as exc:
        raise ConfigurationError(key, f"{key}: {exc}") from None


@dataclass(frozen=True)
class Settings:
    """Immutable run configuration, built once at startup and passed down explicitly."""

    riot_api_key: str
    game_name: str
    tag_line: str

    region: Region = Region.NA1
    window: MatchWindow = field(
        default_factory=lambda: MatchWindow(
            datetime.strptime(DEFAULT_START_DATE, '%Y-%m-%d').astimezone(),
            datetime.now().astimezone(),
        )
    )

    # ── Pipeline ───────────────────────────────────────────────────────
    loss_mode:  LossMode   = LossMode.STRICT
    output_mode: OutputMode = OutputMode.CHAMPIONS
    start_offset: int         = 0
    page_size:    Optional[int] = None   # None -> server default

    # ── Concurrency ────────────────────────────────────────────────────
    max_concurrent_requests: int = 16

    # ── HTTP ───────────────────────────────────────────────────────────
    request_timeout: float = 30.0
    max_retries:     int   = 3
    retry_backoff:   float = 2.0

    # ── Rate limits (personal key hard limits: 20/s and 100/120s) ───────
    rate_limit_per_1_sec: int = 18
    rate_limit_per_2_min: int = 90

    # ── Logging ────────────────────────────────────────────────────────
    log_level: str            = 'INFO'
    log_dir:   Optional[Path] = None

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}#{self.tag_line}"

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        *,
        load_env_file: bool = True,
    ) -> 'Settings':
        """Build settings from the environment (and ``config/.env`` when present).

        Raises ConfigurationError naming the offending key.
        """
        if env is None:
            if load_env_file:
                load_dotenv(dotenv_path=ENV_PATH)
            env = os.environ

        api_key   = _required(env, 'RGAPI_KEY')
        game_name = _required(env, 'NUZLOLCKE_GAME_NAME')
        tag_line  = _required(env, 'NUZLOLCKE_TAG_LINE')

        start = _date(env, 'NUZLOLCKE_START_DATE', DEFAULT_START_DATE)
        end   = _date(env, 'NUZLOLCKE_END_DATE', None)
        if end is None:
            end = datetime.now().astimezone()
        else:
            # the end date names a whole day
            end = end + timedelta(days=1) - timedelta(seconds=1)

        page_size = _int(env, 'NUZLOLCKE_PAGE_SIZE', None)
        if page_size is not None and not 1 <= page_size <= 100:
            raise ConfigurationError('NUZLOLCKE_PAGE_SIZE', "NUZLOLCKE_PAGE_SIZE must be between 1 and 100")

        start_offset = _int(env, 'NUZLOLCKE_START_OFFSET', 0)
        if start_offset < 0:
            raise ConfigurationError('NUZLOLCKE_START_OFFSET', "NUZLOLCKE_START_OFFSET must not be negative")

        concurrency = _int(env, 'MAX_CONCURRENT_REQUESTS', 16)
        if concurrency < 1:
            raise ConfigurationError('MAX_CONCURRENT_REQUESTS', "MAX_CONCURRENT_REQUESTS must be at least 1")

        log_dir = env.get('LOG_DIR', '').strip()

        return cls(
            riot_api_key=api_key,
            game_name=game_name,
            tag_line=tag_line,
            region=_choice(env, 'NUZLOLCKE_REGION', Region.NA1.value, Region.from_string),
            window=MatchWindow(start, end),
            loss_mode=_choice(env, 'NUZLOLCKE_LOSS_MODE', LossMode.STRICT.value, LossMode.from_string),
            output_mode=_choice(env, 'NUZLOLCKE_OUTPUT', OutputMode.CHAMPIONS.value, OutputMode.from_string),
            start_offset=start_offset,
            page_size=page_size,
            max_concurrent_requests=concurrency,
            request_timeout=_float(env, 'REQUEST_TIMEOUT', 30.0),
            max_retries=_int(env, 'MAX_RETRIES', 3),
            retry_backoff=_float(env, 'RETRY_BACKOFF', 2.0),
            log_level=env.get('LOG_LEVEL', '').strip() or 'INFO',
            log_dir=Path(log_dir) if log_dir else None,
        )

    def with_overrides(self, **changes: Any) -> 'Settings':
        """Copy with the non-None values of ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
