import logging
from typing import Optional

from siteaudit.domain.config import AuditConfig
from siteaudit.exceptions import ConfigNotFoundError
from siteaudit.services.audit_config_parser import AuditConfigParser
from siteaudit.services.config_file_store import ConfigFileStore

logger = logging.getLogger(__name__)


class ConfigService:
    """Lists and resolves named audit profiles from YAML files on disk."""

    def __init__(self, file_store: ConfigFileStore, parser: Optional[AuditConfigParser] = None):
        self.file_store = file_store
        self.parser = parser or AuditConfigParser()

    def list_configs(self) -> list[AuditConfig]:
        configs = []
        for fname in self.file_store.list_config_files():
            data = self.file_store.load_yaml_dict(fname)
            if data is None:
                continue
            cfg = self.parser.parse(config_path=fname, data=data)
            if cfg is not None:
                configs.append(cfg)
        return configs

    def get_config(self, name: str) -> AuditConfig:
        """Return the profile called `name` (or stored in file `name`)."""
        for cfg in self.list_configs():
            if cfg.name == name or cfg.config_path == name:
                return cfg
        raise ConfigNotFoundError(name)
