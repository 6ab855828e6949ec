# /app/client/school_client.py

"""HTTP client for the School Hub API with a read cache that is invalidated on every mutation."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import requests

from .query_cache import Key, QueryCache

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10

STUDENTS_KEY: Key = ("students",)
CLASSES_KEY: Key = ("classes",)


def student_key(student_id: str) -> Key:
    return ("student", student_id)


def class_key(class_id: str) -> Key:
    return ("class", class_id)


def class_students_key(class_id: str) -> Key:
    return ("classes", class_id, "students")


class ApiError(Exception):
    def __init__(self, status: int, message: str):
        self.status = status
        self.message = message
        super().__init__(f"{status}: {message}")


class SchoolHubClient:
    def __init__(self, base_url: str = "", session: Optional[Any] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.cache = QueryCache()

    # --- transport ---

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}/api/v1{path}"
        if isinstance(self.session, requests.Session):
            kwargs.setdefault("timeout", REQUEST_TIMEOUT)
        response = self.session.request(method, url, **kwargs)
        if response.status_code >= 400:
            raise ApiError(response.status_code, _error_message(response))
        if response.status_code == 204 or not response.content:
            return None
        body = response.json()
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body

    @contextmanager
    def _invalidating(self, *prefixes: Key) -> Iterator[None]:
        # Runs on success and on failure.
        try:
            yield
        finally:
            for prefix in prefixes:
                self.cache.invalidate(prefix)

    # --- queries ---

    def list_students(self) -> List[Dict]:
        return self.cache.fetch(STUDENTS_KEY, lambda: self._request("GET", "/students"))

    def get_student(self, student_id: str) -> Optional[Dict]:
        def load():
            try:
                return self._request("GET", f"/students/{student_id}")
            except ApiError as e:
                if e.status == 404:
                    return None
                raise
        return self.cache.fetch(student_key(student_id), load)

    def list_classes(self) -> List[Dict]:
        return self.cache.fetch(CLASSES_KEY, lambda: self._request("GET", "/classes"))

    def get_class(self, class_id: str) -> Optional[Dict]:
        def load():
            try:
                return self._request("GET", f"/classes/{class_id}")
            except ApiError as e:
                if e.status == 404:
                    return None
                raise
        return self.cache.fetch(class_key(class_id), load)

    def list_class_students(self, class_id: str) -> List[Dict]:
        return self.cache.fetch(
            class_students_key(class_id),
            lambda: self._request("GET", f"/classes/{class_id}/students"),
        )

    # --- student mutations ---

    def create_student(self, first_name: str, last_name: str) -> Dict:
        with self._invalidating(STUDENTS_KEY):
            return self._request("POST", "/students", json={"firstName": first_name, "lastName": last_name})

    def update_student(self, student_id: str, **fields) -> Dict:
        with self._invalidating(STUDENTS_KEY, student_key(student_id), CLASSES_KEY):
            return self._request("PUT", f"/students/{student_id}", json=fields)

    def delete_student(self, student_id: str) -> None:
        # Class rosters embed student rows.
        with self._invalidating(STUDENTS_KEY, student_key(student_id), CLASSES_KEY):
            self._request("DELETE", f"/students/{student_id}")

    # --- class mutations ---

    def create_class(self, name: str, description: Optional[str] = None) -> Dict:
        payload = {"name": name}
        if description is not None:
            payload["description"] = description
        with self._invalidating(CLASSES_KEY):
            return self._request("POST", "/classes", json=payload)

    def update_class(self, class_id: str, **fields) -> Dict:
        with self._invalidating(CLASSES_KEY, class_key(class_id)):
            return self._request("PUT", f"/classes/{class_id}", json=fields)

    def delete_class(self, class_id: str) -> None:
        # Students' classIds change when a class goes away.
        with self._invalidating(CLASSES_KEY, class_key(class_id), STUDENTS_KEY, ("student",)):
            self._request("DELETE", f"/classes/{class_id}")

    # --- assignment mutations ---

    def _assignment_settled(self):
        return self._invalidating(STUDENTS_KEY, ("student",), CLASSES_KEY)

    def assign_to_class(self, student_id: str, class_id: str) -> None:
        with self._assignment_settled():
            self._request("POST", f"/students/{student_id}/assign-class", json={"classId": class_id})

    def remove_from_class(self, student_id: str, class_id: str) -> None:
        with self._assignment_settled():
            self._request("DELETE", f"/students/{student_id}/classes/{class_id}")

    def assign_many_to_class(self, student_ids: List[str], class_id: str) -> Dict:
        with self._assignment_settled():
            return self._request("POST", f"/classes/{class_id}/students", json={"studentIds": student_ids})

    def remove_many_from_class(self, student_ids: List[str], class_id: str) -> Dict:
        with self._assignment_settled():
            return self._request("DELETE", f"/classes/{class_id}/students", json={"studentIds": student_ids})

    def update_student_classes(self, student_id: str, class_ids: List[str]) -> Dict[str, int]:
        """
        Brings the student's classes in line with `class_ids` using the single
        assign/remove calls, reading the current set fresh from the server.
        """
        with self._assignment_settled():
            current = self._request("GET", f"/students/{student_id}")
            current_ids = set(current["classIds"])
            wanted = set(class_ids)
            to_add = sorted(wanted - current_ids)
            to_remove = sorted(current_ids - wanted)
            for class_id in to_add:
                self._request("POST", f"/students/{student_id}/assign-class", json={"classId": class_id})
            for class_id in to_remove:
                self._request("DELETE", f"/students/{student_id}/classes/{class_id}")
        logger.debug("Updated classes for %s: +%d -%d", student_id, len(to_add), len(to_remove))
        return {"added": len(to_add), "removed": len(to_remove)}


def _error_message(response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or "Unknown error"
    if isinstance(body, dict):
        return str(body.get("detail") or body.get("message") or body)
    return str(body)
