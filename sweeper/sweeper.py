from settings import logger, settings
from sweeper.classifier import is_old
from sweeper.report import bytes_to_mb
from sweeper.stats import SweepStats
from youtrack_api_util.exceptions import YouTrackAPIException
from youtrack_api_util.models import Attachment, Issue
from youtrack_api_util.youtrack_utils import YouTrackAPIAdapter


class AttachmentSweeper:
    """Удаление вложений старше срока хранения.

    Страницы задач обрабатываются по одной, итоги накапливаются в SweepStats.
    Ошибка получения страницы прерывает работу (YouTrackAPIException
    пробрасывается наружу), ошибка удаления вложения только логируется.
    """

    def __init__(
        self,
        adapter: YouTrackAPIAdapter,
        projects: list[str],
        page_size: int,
        retention_years: int,
        page_delay: float = 0.0,
        dry_run: bool = False,
    ):
        logger.debug('Создание экземпляра класса AttachmentSweeper')
        self._adapter = adapter
        self.projects = projects
        self.page_size = page_size
        self.retention_years = retention_years
        self.page_delay = page_delay
        self.dry_run = dry_run

    def run(self) -> SweepStats:
        logger.info(
            f'Поиск вложений старше {self.retention_years} лет, '
            f'проекты: {", ".join(self.projects) or "все"}{", пробный запуск" if self.dry_run else ""}'
        )
        stats = SweepStats()
        for page in self._adapter.iter_issue_pages(self.projects, self.page_size, self.page_delay):
            for issue in page:
                self.process_issue(issue, stats)
        logger.info(
            f'Обработано {stats.attachments_seen} вложений, старых {stats.old_count}, '
            f'удалено {stats.deleted_count}, ошибок удаления {stats.failed_count}'
        )
        return stats

    def process_issue(self, issue: Issue, stats: SweepStats):
        project_name = issue.project.name
        if self.projects and project_name not in self.projects:
            logger.debug(f'Задача {issue.issue_id} из проекта {project_name} не входит в фильтр, пропуск')
            return
        for attachment in issue.attachments:
            stats.add_attachment(attachment.size)
            if not is_old(attachment, self.retention_years):
                continue
            stats.add_old(project_name, attachment.size)
            if self.dry_run:
                self._log_old_attachment(issue, attachment)
            elif self._delete(issue, attachment):
                stats.add_deleted(project_name, attachment.size)
            else:
                stats.add_failed()

    def _delete(self, issue: Issue, attachment: Attachment) -> bool:
        try:
            self._adapter.delete_attachment(issue.issue_id, attachment.attachment_id)
        except YouTrackAPIException as e:
            logger.error(f'Ошибка удаления вложения {attachment.attachment_id} задачи {issue.issue_id}: {e}')
            return False
        logger.info(f'Удалено старое вложение {attachment.attachment_id} задачи {issue.issue_id}')
        return True

    @staticmethod
    def _log_old_attachment(issue: Issue, attachment: Attachment):
        created = attachment.created.strftime(settings.time_format) if attachment.created else '-'
        updated = attachment.updated.strftime(settings.time_format) if attachment.updated else '-'
        logger.info(
            f'Old attachment {attachment.attachment_id} in {issue.issue_id}: '
            f'Size: {bytes_to_mb(attachment.size):.2f} MB, Created: {created}, Updated: {updated}'
        )
