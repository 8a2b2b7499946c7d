"""API 客户端封装"""

from typing import Any

import httpx

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class APIError(Exception):
    """服务端返回的分类错误"""

    def __init__(self, status_code: int, category: str, message: str):
        self.status_code = status_code
        self.category = category
        self.message = message
        super().__init__(f"{category} ({status_code}): {message}")


class APIClient:
    """Timetable API 客户端"""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        caller: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {"X-Caller": caller} if caller else {}
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self.headers,
            transport=self._transport,
        )

    @staticmethod
    def _unwrap(resp: httpx.Response) -> Any:
        """成功返回 JSON，失败抛出 APIError"""
        if resp.is_success:
            return resp.json()
        try:
            body = resp.json()
            raise APIError(resp.status_code, body.get("error", "Error"), body.get("message", resp.text))
        except ValueError:
            raise APIError(resp.status_code, "Error", resp.text)

    async def _get(self, path: str, params: dict | None = None) -> Any:
        async with self._client() as client:
            return self._unwrap(await client.get(path, params=params))

    async def _post(self, path: str, payload: dict | None = None) -> Any:
        async with self._client() as client:
            return self._unwrap(await client.post(path, json=payload))

    async def health_check(self) -> bool:
        """健康检查"""
        try:
            async with self._client() as client:
                resp = await client.get("/health")
                return resp.status_code == 200
        except httpx.HTTPError:
            return False

    # 用户
    async def create_user(self, username: str, password: str, email: str, role: str) -> dict:
        return await self._post("/api/v1/users", {
            "username": username, "password": password, "email": email, "role": role,
        })

    async def list_users(self, limit: int = 50, offset: int = 0) -> dict:
        return await self._get("/api/v1/users", {"limit": limit, "offset": offset})

    async def get_user(self, user_id: str) -> dict:
        return await self._get(f"/api/v1/users/{user_id}")

    async def change_role(self, user_id: str, role: str) -> dict:
        async with self._client() as client:
            return self._unwrap(await client.put(f"/api/v1/users/{user_id}/role", json={"role": role}))

    # 课程 / 教师 / 教室
    async def create_course(self, payload: dict) -> dict:
        return await self._post("/api/v1/courses", payload)

    async def list_courses(self, limit: int = 50, offset: int = 0) -> dict:
        return await self._get("/api/v1/courses", {"limit": limit, "offset": offset})

    async def create_instructor(self, payload: dict) -> dict:
        return await self._post("/api/v1/instructors", payload)

    async def list_instructors(self, limit: int = 50, offset: int = 0) -> dict:
        return await self._get("/api/v1/instructors", {"limit": limit, "offset": offset})

    async def available_instructors(self, time_slot: str) -> dict:
        return await self._get("/api/v1/instructors/available", {"time_slot": time_slot})

    async def create_classroom(self, payload: dict) -> dict:
        return await self._post("/api/v1/classrooms", payload)

    async def list_classrooms(self, limit: int = 50, offset: int = 0) -> dict:
        return await self._get("/api/v1/classrooms", {"limit": limit, "offset": offset})

    # 课表
    async def list_timetables(self, limit: int = 50, offset: int = 0, course_id: str | None = None) -> dict:
        params = {"limit": limit, "offset": offset}
        if course_id:
            params["course_id"] = course_id
        return await self._get("/api/v1/timetables", params)

    async def auto_timetable(self) -> dict:
        return await self._post("/api/v1/timetables/auto")
