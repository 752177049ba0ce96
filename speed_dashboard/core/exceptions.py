
class SpeedDashboardError(Exception):
    """Base exception for all speed_dashboard errors"""
    pass

class ConfigError(SpeedDashboardError):
    """Invalid or inconsistent global.json or environment config"""
    pass

class DatasetLoadError(SpeedDashboardError):
    """
    The measurements file could not be read:
    missing file, unreadable encoding, no header, missing country column, etc
    """
    pass
