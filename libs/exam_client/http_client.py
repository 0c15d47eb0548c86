# PATH: libs/exam_client/http_client.py
#
# PURPOSE:
# - 학생 응시 API 전용 HTTP client
# - 세션(ExamSession)은 HTTP를 모르고 이 클라이언트만 안다
#
# ENDPOINTS:
# - GET  /api/v1/exam/{id}/
# - POST /api/v1/exam/{id}/submit/
# - GET  /api/v1/exam/{id}/my-result/
#
# DESIGN:
# - timeout 명시
# - retry 없음 (제출은 중복 방지가 우선)
# - 2xx 아니면 status 별 ExamAPIError 하위 타입으로 변환

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .errors import ExamAPIUnavailableError, error_for

logger = logging.getLogger("exam_client.http")


class ExamAPIClient:
    def __init__(
        self,
        base_url: str,
        *,
        access_token: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        if not base_url:
            raise ValueError("base_url is required")

        self._base_url = str(base_url).rstrip("/")
        self._timeout = float(timeout_seconds or 10.0)

        self._headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if access_token:
            self._headers["Authorization"] = f"Bearer {access_token}"

        self._session = session or requests.Session()

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "ExamAPIClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # --------------------------------------------------
    # Exam
    # --------------------------------------------------

    def fetch_exam(self, exam_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/exam/{int(exam_id)}/")

    def submit(self, exam_id: int, *, answers: list, time_spent: int) -> Dict[str, Any]:
        return self._request(
            "POST",
            f"/exam/{int(exam_id)}/submit/",
            json={"answers": answers, "timeSpent": int(time_spent)},
        )

    def fetch_my_result(self, exam_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/exam/{int(exam_id)}/my-result/")

    # --------------------------------------------------
    # internal
    # --------------------------------------------------

    def _request(self, method: str, path: str, *, json: Any = None) -> Dict[str, Any]:
        url = f"{self._base_url}{path}"
        try:
            resp = self._session.request(
                method,
                url,
                json=json,
                headers=self._headers,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.warning("exam api unreachable method=%s url=%s error=%s", method, url, e)
            raise ExamAPIUnavailableError(str(e)) from e

        data = self._json_or_empty(resp)

        if 200 <= resp.status_code < 300:
            return data

        logger.info("exam api error method=%s url=%s status=%s", method, url, resp.status_code)
        raise error_for(resp.status_code, data)

    @staticmethod
    def _json_or_empty(resp) -> Dict[str, Any]:
        if not resp.content:
            return {}
        try:
            data = resp.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
