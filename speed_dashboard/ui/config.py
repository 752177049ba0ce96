from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from speed_dashboard.config.model import GlobalConfig
from speed_dashboard.core.dataset import Dataset
from speed_dashboard.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: config, the loaded Dataset and the view
    registry. Passed into layout + callback registration functions instead
    of module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    dataset: Dataset
    registry: Optional[ViewRegistry] = None
    view_ids: List[str] = field(default_factory=list)

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        missing = [v for v in self.view_ids if v not in self.registry]
        if missing:
            raise RuntimeError(f"AppConfig.view_ids not registered: {missing}")
