from app.services.auth import AuthService
from app.services.stats import build_stats

__all__ = ["AuthService", "build_stats"]
