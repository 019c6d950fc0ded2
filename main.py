import argparse
import sys

from pydantic import ValidationError

from settings import Settings, logger, settings
from sweeper.report import format_report
from sweeper.sweeper import AttachmentSweeper
from youtrack_api_util.exceptions import YouTrackAPIException
from youtrack_api_util.youtrack_utils import YouTrackAPIAdapter


def get_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description='Удаление старых вложений из YouTrack через REST API')
    p.add_argument(
        '-u',
        '--url',
        dest='youtrack_url',
        help='URL списка задач YouTrack REST API, пример: https://example.myjetbrains.com/api/issues',
    )
    p.add_argument(
        '-t',
        '--token',
        dest='youtrack_token',
        help='Постоянный токен YouTrack',
    )
    p.add_argument(
        '-p',
        '--projects',
        dest='project_filter',
        help='Названия проектов через запятую, по умолчанию все проекты',
    )
    p.add_argument(
        '--page-size',
        dest='page_size',
        help='Количество задач на страницу',
        type=int,
    )
    p.add_argument(
        '--retention-years',
        dest='retention_years',
        help='Срок хранения вложений в годах',
        type=int,
    )
    p.add_argument(
        '--page-delay',
        dest='page_delay',
        help='Пауза между страницами в секундах',
        type=float,
    )
    p.add_argument(
        '--timeout',
        dest='request_timeout',
        help='Таймаут одного запроса в секундах',
        type=float,
    )
    p.add_argument(
        '--dry-run',
        dest='dry_run',
        help='Только вывести список старых вложений, ничего не удалять',
        action=argparse.BooleanOptionalAction,
    )
    p.add_argument(
        '--log-level',
        dest='log_level',
        help='Уровень логирования',
    )
    return p


def load_settings(args: argparse.Namespace) -> Settings:
    overrides = {k: v for k, v in vars(args).items() if v is not None}
    if not overrides:
        return settings
    return Settings(**{**settings.model_dump(), **overrides})


def main(argv: list[str] | None = None) -> int:
    args = get_parser().parse_args(argv)
    try:
        s = load_settings(args)
    except ValidationError as e:
        logger.critical(f'Проверьте значения параметров!\n{e}')
        return 1
    if not all((s.youtrack_url, s.youtrack_token)):
        logger.critical('Не заданы URL YouTrack или токен, проверьте значения параметров!')
        return 1
    logger.remove()
    logger.add(sys.stderr, level=s.log_level)
    logger.info('Начало работы')
    adapter = YouTrackAPIAdapter(s.youtrack_url, s.youtrack_token, s.request_timeout)
    sweeper = AttachmentSweeper(adapter, s.projects, s.page_size, s.retention_years, s.page_delay, s.dry_run)
    try:
        stats = sweeper.run()
    except YouTrackAPIException as e:
        logger.critical(f'Работа прервана: {e}')
        return 1
    finally:
        adapter.close()
    for line in format_report(stats, s.project_filter, s.dry_run):
        print(line)
    logger.info('Завершение работы')
    return 0


def cli():
    sys.exit(main())


if __name__ == '__main__':
    cli()
