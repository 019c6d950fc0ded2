from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def from_millis(value: int | str | None) -> datetime | None:
    if value is None:
        return None
    return EPOCH + timedelta(milliseconds=int(value))


@dataclass
class Project:
    name: str


@dataclass
class Attachment:
    attachment_id: str
    size: int
    created: datetime | None
    updated: datetime | None = None

    @classmethod
    def from_json(cls, attachment_json: dict) -> 'Attachment':
        return cls(
            str(attachment_json.get('id')),
            int(attachment_json.get('size') or 0),
            from_millis(attachment_json.get('created')),
            from_millis(attachment_json.get('updated')),
        )


@dataclass
class Issue:
    issue_id: str
    project: Project
    attachments: list[Attachment] = field(default_factory=list)

    @classmethod
    def from_json(cls, issue_json: dict) -> 'Issue':
        project_json = issue_json.get('project') or {}
        return cls(
            issue_json.get('idReadable'),
            Project(project_json.get('name', '')),
            [Attachment.from_json(a) for a in issue_json.get('attachments') or []],
        )
