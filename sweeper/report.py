from sweeper.stats import SweepStats, rank_projects


def bytes_to_mb(size: int) -> float:
    return size / 1024 / 1024


def format_report(stats: SweepStats, project_filter: str = '', dry_run: bool = False) -> list[str]:
    lines = [
        f'Total attachments size in {project_filter or "all projects"}: {bytes_to_mb(stats.total_size):.2f} MB',
        f'Total old attachments size: {bytes_to_mb(stats.old_size):.2f} MB',
    ]
    if dry_run:
        project_sizes = stats.project_old_sizes
    else:
        lines.append(f'Total deleted attachments size: {bytes_to_mb(stats.deleted_size):.2f} MB')
        if stats.failed_count:
            lines.append(f'Failed deletions: {stats.failed_count}')
        project_sizes = stats.project_deleted_sizes
    for name, size in rank_projects(project_sizes):
        lines.append(f'Project {name}: {bytes_to_mb(size):.2f} MB')
    return lines
