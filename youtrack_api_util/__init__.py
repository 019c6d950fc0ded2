from youtrack_api_util.exceptions import YouTrackAPIException
from youtrack_api_util.models import Attachment, Issue, Project
from youtrack_api_util.youtrack_utils import YouTrackAPIAdapter, YouTrackSession
