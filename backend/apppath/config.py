"""
Configuration management for apppath.

Reads configuration from config/apppath.yaml and provides default values.

The two application directories are plain values: code that turns ``app:`` or
``app-storage:`` paths into native ones receives a ``DirectoriesConfig``
argument instead of reading process-wide state. The module-level instance
returned by ``get_config`` is only a convenience for the HTTP server.
"""

from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field
import yaml

from .core.resolver import resolve
from .utils.logging_utils import get_logger
from .utils.path_utils import ensure_dir


logger = get_logger("config")


def get_project_root() -> Path:
    """Get the project root directory."""
    # backend/apppath/config.py -> project root
    return Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class DirectoriesConfig:
    """Base directories of the ``app:`` and ``app-storage:`` schemes."""
    installation_dir: str = "."
    storage_dir: str = "data/storage"

    def resolve(self, project_root: Path) -> "DirectoriesConfig":
        """Resolve relative directories against project root."""
        root = str(project_root)
        return DirectoriesConfig(
            installation_dir=resolve(root, self.installation_dir),
            storage_dir=resolve(root, self.storage_dir)
        )


@dataclass
class ServerConfig:
    """Server configuration."""
    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class AppPathConfig:
    """Complete configuration."""
    directories: DirectoriesConfig = field(default_factory=DirectoriesConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    project_root: Path = field(default_factory=get_project_root)
    create_storage: bool = True

    def __post_init__(self):
        """Resolve directories after initialization."""
        self.directories = self.directories.resolve(self.project_root)
        if self.create_storage:
            ensure_dir(self.directories.storage_dir)


def load_config(
    config_path: Optional[str] = None,
    project_root: Optional[Path] = None
) -> AppPathConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to apppath.yaml. If None, uses default location.
        project_root: Base for relative directories. If None, the
            repository root.

    Returns:
        AppPathConfig instance with loaded or default values.
    """
    if project_root is None:
        project_root = get_project_root()

    if config_path is None:
        config_path = project_root / "config" / "apppath.yaml"
    else:
        config_path = Path(config_path)

    directories_cfg = DirectoriesConfig()
    server_cfg = ServerConfig()
    logging_cfg = LoggingConfig()

    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

            if 'directories' in data:
                dirs_data = data['directories'] or {}
                directories_cfg = DirectoriesConfig(
                    installation_dir=str(dirs_data.get(
                        'installation_dir', directories_cfg.installation_dir)),
                    storage_dir=str(dirs_data.get(
                        'storage_dir', directories_cfg.storage_dir))
                )

            if 'server' in data:
                server_data = data['server'] or {}
                server_cfg = ServerConfig(
                    host=server_data.get('host', server_cfg.host),
                    port=int(server_data.get('port', server_cfg.port))
                )

            if 'logging' in data:
                logging_data = data['logging'] or {}
                logging_cfg = LoggingConfig(
                    level=logging_data.get('level', logging_cfg.level),
                    file=logging_data.get('file', logging_cfg.file)
                )

        except (OSError, yaml.YAMLError, AttributeError, TypeError, ValueError) as e:
            logger.warning(
                "Failed to load config from %s: %s. Using default configuration.",
                config_path, e
            )
            directories_cfg = DirectoriesConfig()
            server_cfg = ServerConfig()
            logging_cfg = LoggingConfig()
    else:
        logger.debug("No config file at %s, using defaults", config_path)

    return AppPathConfig(
        directories=directories_cfg,
        server=server_cfg,
        logging=logging_cfg,
        project_root=project_root
    )


# Global configuration instance
_config: Optional[AppPathConfig] = None


def get_config() -> AppPathConfig:
    """Get the global configuration instance.

    Loads configuration on first call, then returns cached instance.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(config_path: Optional[str] = None) -> AppPathConfig:
    """Reload configuration from file.

    Args:
        config_path: Optional path to configuration file.

    Returns:
        New AppPathConfig instance.
    """
    global _config
    _config = load_config(config_path)
    return _config
