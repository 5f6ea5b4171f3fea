# aws/menus.py
from __future__ import annotations

from .. import settings
from ..ui.console import Console
from .models import RemoteCallFailed
from .s3_client import ObjectStore


def select_language(console: Console, store: ObjectStore, title: str) -> str:
    """Ask for one of the languages found in the corpus bucket."""
    console.ask(title)
    console.print_info("Loading options...")
    result = store.list_languages()
    if not result.ok:
        raise RemoteCallFailed(result.error)
    return console.select_option("Language options:", result.value)


def select_instance_type(console: Console, title: str) -> str:
    """
    Ask for an EC2 instance type. Some types are not allowed for some
    applications; check the AWS documentation for an updated list.
    """
    console.ask(title)
    return console.select_option("Instance type options:", sorted(settings.INSTANCE_TYPES), columns=3)
