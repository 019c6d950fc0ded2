from collections import defaultdict
from dataclasses import dataclass, field


@dataclass
class SweepStats:
    total_size: int = 0
    old_size: int = 0
    deleted_size: int = 0
    attachments_seen: int = 0
    old_count: int = 0
    deleted_count: int = 0
    failed_count: int = 0
    project_old_sizes: dict[str, int] = field(default_factory=lambda: defaultdict(int))
    project_deleted_sizes: dict[str, int] = field(default_factory=lambda: defaultdict(int))

    def add_attachment(self, size: int):
        self.attachments_seen += 1
        self.total_size += size

    def add_old(self, project_name: str, size: int):
        self.old_count += 1
        self.old_size += size
        self.project_old_sizes[project_name] += size

    def add_deleted(self, project_name: str, size: int):
        self.deleted_count += 1
        self.deleted_size += size
        self.project_deleted_sizes[project_name] += size

    def add_failed(self):
        self.failed_count += 1


def rank_projects(project_sizes: dict[str, int]) -> list[tuple[str, int]]:
    """Проекты по убыванию размера, при равенстве по имени."""
    return sorted(project_sizes.items(), key=lambda item: (-item[1], item[0]))
