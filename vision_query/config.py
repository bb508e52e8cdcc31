from __future__ import annotations

from dataclasses import dataclass, fields
import os
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigError
from .utils import _parse_bool, log, set_debug

ENV_PREFIX = "VISION_QUERY_"


def _parse_int(key: str, v: Any) -> int:
    try:
        return int(str(v).strip())
    except ValueError:
        raise ConfigError(f"{key}: expected an integer, got {v!r}") from None


def _strip_inline_comment(s: str) -> str:
    """Drop a trailing `# comment`, keeping hashes inside quotes."""
    in_single = False
    in_double = False
    for i, ch in enumerate(s):
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == "#" and not in_single and not in_double:
            return s[:i].rstrip()
    return s.rstrip()


def _parse_scalar(value: str) -> Any:
    if value in ("", "null", "~"):
        return None
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    try:
        return int(value)
    except ValueError:
        return value


def _parse_simple_yaml(path: Path) -> dict[str, Any]:
    """
    Minimal parser for flat `key: value` config files.

    Supports comments, quoted and unquoted strings, true/false, null/~ and ints.
    Nested mappings and lists are not supported.
    """
    data: dict[str, Any] = {}
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        line = _strip_inline_comment(line)
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        key = key.strip()
        if key:
            data[key] = _parse_scalar(value.strip())
    return data


def _find_config_file() -> Optional[Path]:
    """
    Config file precedence:
    1) VISION_QUERY_CONFIG (explicit path)
    2) <project_root>/config.yaml (parent of the vision_query package)
    3) ./config.yaml
    """
    env_path = os.environ.get(ENV_PREFIX + "CONFIG")
    if env_path:
        p = Path(env_path).expanduser()
        if not p.is_file():
            raise ConfigError(f"{ENV_PREFIX}CONFIG points to a missing file: {p}")
        return p

    project_config = Path(__file__).resolve().parent.parent / "config.yaml"
    if project_config.is_file():
        return project_config

    cwd = Path.cwd() / "config.yaml"
    if cwd.is_file():
        return cwd

    return None


@dataclass(frozen=True)
class ClientConfig:
    """
    Where and how a Query is sent.

    Precedence for values:
    - explicit code config
    - environment variables (VISION_QUERY_*)
    - config.yaml
    - built-in defaults
    """
    host: str = "api.openai.com"
    scheme: str = "https"
    base_path: str = "/v1"
    chat_path: str = "/chat/completions"

    token: Optional[str] = None
    organization: Optional[str] = None

    timeout_seconds: int = 60
    debug: bool = False

    @property
    def chat_url(self) -> str:
        base = "/" + self.base_path.strip("/") if self.base_path.strip("/") else ""
        return f"{self.scheme}://{self.host.rstrip('/')}{base}/{self.chat_path.lstrip('/')}"

    @staticmethod
    def from_mapping(m: dict[str, Any]) -> "ClientConfig":
        known = {f.name for f in fields(ClientConfig)}
        unknown = sorted(set(m) - known)
        if unknown:
            log("[vision-query] ignoring unknown config keys:", ", ".join(unknown))

        values = {k: v for k, v in m.items() if k in known and v is not None}
        if "timeout_seconds" in values:
            values["timeout_seconds"] = _parse_int("timeout_seconds", values["timeout_seconds"])
        if "debug" in values and isinstance(values["debug"], str):
            values["debug"] = _parse_bool(values["debug"])
        for key in ("host", "scheme", "base_path", "chat_path", "token", "organization"):
            if key in values:
                values[key] = str(values[key])
        return ClientConfig(**values)

    @staticmethod
    def load() -> "ClientConfig":
        """
        Load configuration using precedence:
        1) environment overrides (VISION_QUERY_*)
        2) config.yaml (if present)
        3) defaults
        """
        base: dict[str, Any] = {}
        cfg_path = _find_config_file()
        if cfg_path:
            log("[vision-query] loading config:", cfg_path)
            base.update(_parse_simple_yaml(cfg_path))

        env = os.environ
        for f in fields(ClientConfig):
            v = env.get(ENV_PREFIX + f.name.upper())
            if v:
                base[f.name] = v

        # the conventional variable works as a fallback for the token
        if not base.get("token") and env.get("OPENAI_API_KEY"):
            base["token"] = env["OPENAI_API_KEY"]

        cfg = ClientConfig.from_mapping(base)
        set_debug(True if cfg.debug else None)
        return cfg
