"""Lecture attendance service.

Organized by feature modules (users, students, lectures, attendance) with a
thin Flask controller layer over service/repository layers.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
