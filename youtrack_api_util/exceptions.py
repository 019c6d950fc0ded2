class YouTrackAPIException(Exception):
    pass
