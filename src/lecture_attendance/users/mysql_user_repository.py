from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Credential
from .repository import UserRepository


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_username(self, username: str) -> Optional[Credential]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT user_id, username, password_hash FROM users WHERE username=%s",
                (username,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Credential(
                user_id=int(row["user_id"]),
                username=row["username"],
                password_hash=row["password_hash"],
            )

    def create_user(self, *, username: str, password_hash: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO users(username, password_hash) VALUES(%s,%s)",
                    (username, password_hash),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            raise ConflictError("Username already exists") from e

    def update_password_hash(self, *, username: str, password_hash: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE users SET password_hash=%s WHERE username=%s",
                (password_hash, username),
            )
            return cur.rowcount > 0
