from outreach.models.job import Job
from outreach.models.company import Company
from outreach.models.log import Log
from outreach.models.user import User
from outreach.models.settings import SettingsDocument, GLOBAL_SETTINGS_ID

__all__ = ["Job", "Company", "Log", "User", "SettingsDocument", "GLOBAL_SETTINGS_ID"]
