"""
Application lookup in Steam's registry.vdf.

Only the ``Registry/HKCU/Software/Valve/Steam/Apps`` branch is read. Every
other branch of the file is skipped without being interpreted.
"""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import BinaryIO, Optional, Union

import regex

from ..core.navigator import Navigator
from ..core.tokenizer import Token, Tokenizer, TokenType
from ..security.exceptions import AcfError, UnexpectedToken
from ..utils.config import ReaderConfig

logger = logging.getLogger(__name__)

APPS_PATH = ("Registry", "HKCU", "Software", "Valve", "Steam", "Apps")


class InvalidPattern(AcfError):
    """A name search pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


class AppNotFound(AcfError):
    """No installed app has the requested id or name."""

    def __init__(self, app: str):
        self.app = app
        super().__init__(
            f"No app with id or name {app!r}",
            suggestions=["Run 'steamacf list' to see the installed apps"],
        )


class AppRegistry(Mapping[str, Optional[str]]):
    """Read-only mapping of application id to display name.

    Applications without a ``name`` field map to None.
    """

    def __init__(self, apps: dict[str, Optional[str]]):
        self._apps = dict(apps)

    def __getitem__(self, app_id: str) -> Optional[str]:
        return self._apps[app_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._apps)

    def __len__(self) -> int:
        return len(self._apps)

    def __repr__(self) -> str:
        return f"AppRegistry({self._apps!r})"

    def resolve(self, app: str) -> Optional[str]:
        """Turn an app id or display name into an app id.

        An exact id wins; otherwise names are compared case-insensitively
        and the first match in file order is returned.
        """
        if app in self._apps:
            return app
        wanted = app.casefold()
        for app_id, name in self._apps.items():
            if name is not None and name.casefold() == wanted:
                return app_id
        return None

    def find(self, pattern: str) -> list[tuple[str, str]]:
        """Return (id, name) pairs whose name matches ``pattern``.

        The pattern is a case-insensitive regular expression searched
        anywhere in the name. Raises InvalidPattern when it does not
        compile.
        """
        try:
            compiled = regex.compile(pattern, regex.IGNORECASE)
        except regex.error as err:
            raise InvalidPattern(pattern, str(err)) from err
        return [
            (app_id, name)
            for app_id, name in self._apps.items()
            if name is not None and compiled.search(name)
        ]


def read_apps(navigator: Navigator) -> AppRegistry:
    """Read the Apps branch from a navigator positioned at the document root."""
    navigator.select_path(APPS_PATH)
    navigator.expect(Token.dict_start())

    apps: dict[str, Optional[str]] = {}
    while True:
        token = navigator.expect_next()
        if token.type is TokenType.DICT_END:
            break
        if not token.is_string:
            raise UnexpectedToken(token)

        app_id = token.value
        navigator.expect(Token.dict_start())
        if navigator.select("name"):
            apps[app_id] = navigator.read_string()
            navigator.close_dict()
        else:
            # select consumed the app's closing brace
            apps[app_id] = None

    logger.debug("Loaded %d apps from registry", len(apps))
    return AppRegistry(apps)


def load_registry(
    source: Union[str, Path, BinaryIO], config: Optional[ReaderConfig] = None
) -> AppRegistry:
    """Load the app registry from a path or an open binary stream."""
    if isinstance(source, (str, Path)):
        logger.debug("Reading registry from %s", source)
        with open(source, "rb") as stream:
            return read_apps(Navigator(Tokenizer(stream, config)))
    return read_apps(Navigator(Tokenizer(source, config)))
