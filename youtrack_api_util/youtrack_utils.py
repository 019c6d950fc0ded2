import json
import time
from typing import Iterator

from requests import RequestException, Response, Session

from settings import logger
from youtrack_api_util.exceptions import YouTrackAPIException
from youtrack_api_util.models import Issue

ISSUE_FIELDS = 'idReadable,project(name),attachments(id,size,created,updated)'


class YouTrackSession(Session):
    def __init__(self, base_url: str = None, token: str = None, timeout: float | None = None):
        super().__init__()
        self._base_url: str = base_url
        self._timeout: float | None = timeout
        self.headers.update({'Authorization': f'Bearer {token}', 'Accept': 'application/json'})

    def request(self, method, url, *args, **kwargs):
        joined_url: str = f'{self._base_url}{url}'
        kwargs.setdefault('timeout', self._timeout)
        return super().request(method, joined_url, *args, **kwargs)


def build_query(projects: list[str]) -> str:
    if not projects:
        return 'has: attachments'
    return f'project: {",".join(projects)} has: attachments'


class YouTrackAPIAdapter:
    def __init__(self, base_url: str, token: str, timeout: float | None = None, session: Session | None = None):
        self._session: Session = session if session is not None else YouTrackSession(base_url, token, timeout)

    def close(self):
        self._session.close()

    def search_issues(self, query: str, top: int, skip: int = 0) -> list[Issue]:
        params = {'fields': ISSUE_FIELDS, '$top': top}
        if skip:
            params['$skip'] = skip
        params['query'] = query
        try:
            r: Response = self._session.get('', params=params)
        except RequestException as e:
            raise YouTrackAPIException(f'Ошибка запроса списка задач: {e}') from e
        self._check_response('search_issues', r)
        try:
            issues_json = json.loads(r.text)
        except json.decoder.JSONDecodeError as e:
            raise YouTrackAPIException(f'Не удалось разобрать ответ со списком задач: {e}') from e
        if not isinstance(issues_json, list):
            raise YouTrackAPIException('Ответ со списком задач не является JSON-массивом')
        try:
            return [Issue.from_json(i) for i in issues_json]
        except (AttributeError, TypeError, ValueError) as e:
            raise YouTrackAPIException(f'Некорректная запись в ответе со списком задач: {e}') from e

    def iter_issue_pages(self, projects: list[str], page_size: int, delay: float = 0.0) -> Iterator[list[Issue]]:
        query = build_query(projects)
        skip = 0
        while True:
            page = self.search_issues(query, page_size, skip)
            skip += len(page)
            logger.debug(f'Получена страница из {len(page)} задач, всего получено {skip}')
            yield page
            if len(page) < page_size:
                return
            time.sleep(delay)

    def delete_attachment(self, issue_id: str, attachment_id: str):
        url = f'/{issue_id}/attachments/{attachment_id}'
        try:
            r: Response = self._session.delete(url)
        except RequestException as e:
            raise YouTrackAPIException(f'Ошибка удаления вложения {attachment_id} задачи {issue_id}: {e}') from e
        if r.status_code != 200:
            raise YouTrackAPIException(
                f'Не удалось удалить вложение {attachment_id} задачи {issue_id}: код ответа {r.status_code}'
            )

    @staticmethod
    def _check_response(method_name: str, response: Response):
        if not response.status_code // 100 == 2:
            try:
                error_json = json.loads(response.text)
                message = f'{error_json.get("error")}: {error_json.get("error_description")}'
            except (json.decoder.JSONDecodeError, AttributeError):
                message = response.text
            raise YouTrackAPIException(
                f'Ошибка во время выполнения метода {method_name}, код ответа {response.status_code}\n{message}'
            )
