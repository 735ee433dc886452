"""Third-party widget embeds (map and chat) with an explicit lifecycle.

Widget settings are plain config objects handed to a :class:`WidgetLoader`
created for each rendered page. Mounting a widget registers it with that
loader; :meth:`WidgetLoader.render` then emits, per mounted widget, a JSON
config block plus a small bootstrap script that reads the block by id.

The map bootstrap keeps its settings local. The chat bootstrap is the one
exception: the vendor embed script only reads its settings from
``window.difyChatbotConfig``, so that bootstrap copies the JSON block into
that global immediately before injecting the embed. Templates never write
globals themselves.

Example
-------
>>> loader = WidgetLoader()
>>> loader.mount(ChatWidgetConfig(token="abc123"))
True
>>> loader.mounted
['chat']
>>> loader.unmount("chat")
True
>>> str(loader.render())
''
"""

from __future__ import annotations

import dataclasses as dc
import json
import typing as typ
from urllib.parse import urlencode

from markupsafe import Markup, escape

MAP_BOOTSTRAP = """(function () {
  var cfg = JSON.parse(document.getElementById("%(config_id)s").textContent);
  var showFallback = function () {
    var container = document.getElementById(cfg.container);
    var fallback = document.getElementById(cfg.fallback);
    if (container && fallback) {
      container.style.display = "none";
      fallback.style.display = "flex";
    }
  };
  var script = document.createElement("script");
  script.src = cfg.src;
  script.onload = function () {
    try {
      new AMap.Map(cfg.container, {zoom: cfg.zoom, center: cfg.center, viewMode: "2D"});
    } catch (err) {
      console.error("map init failed", err);
      showFallback();
    }
  };
  script.onerror = showFallback;
  document.head.appendChild(script);
})();"""

CHAT_BOOTSTRAP = """(function () {
  var cfg = JSON.parse(document.getElementById("%(config_id)s").textContent);
  window.difyChatbotConfig = {token: cfg.token, baseUrl: cfg.baseUrl};
  var script = document.createElement("script");
  script.src = cfg.src;
  script.id = cfg.token;
  script.defer = true;
  document.body.appendChild(script);
})();"""


@dc.dataclass(slots=True)
class MapWidgetConfig:
    """Client settings for the embedded map on the contact page."""

    name: typ.ClassVar[str] = "map"

    api_key: str | None = None
    center: tuple[float, float] = (121.5, 31.22)
    zoom: int = 10
    version: str = "2.0"
    plugins: tuple[str, ...] = ("AMap.Scale", "AMap.ToolBar")
    script_url: str = "https://webapi.amap.com/maps"
    container_id: str = "map-container"
    fallback_id: str = "map-fallback"

    @property
    def enabled(self) -> bool:
        """Return ``True`` when an API key is configured."""
        return bool(self.api_key)

    @property
    def script_src(self) -> str:
        """Return the vendor script URL including key and plugins."""
        query = {"v": self.version, "key": self.api_key or ""}
        if self.plugins:
            query["plugin"] = ",".join(self.plugins)
        return f"{self.script_url}?{urlencode(query, safe=',')}"

    def client_config(self) -> dict[str, typ.Any]:
        """Return the JSON-serialisable payload read by the bootstrap script."""
        return {
            "src": self.script_src,
            "container": self.container_id,
            "fallback": self.fallback_id,
            "center": list(self.center),
            "zoom": self.zoom,
        }

    def bootstrap(self, config_id: str) -> str:
        """Return the inline script that loads the map for ``config_id``."""
        return MAP_BOOTSTRAP % {"config_id": config_id}


@dc.dataclass(slots=True)
class ChatWidgetConfig:
    """Client settings for the floating chat bubble."""

    name: typ.ClassVar[str] = "chat"

    token: str | None = None
    base_url: str = "https://udify.app"
    script_path: str = "/embed.min.js"

    @property
    def enabled(self) -> bool:
        """Return ``True`` when a chatbot token is configured."""
        return bool(self.token)

    @property
    def script_src(self) -> str:
        """Return the embed script URL."""
        return f"{self.base_url.rstrip('/')}{self.script_path}"

    def client_config(self) -> dict[str, typ.Any]:
        """Return the JSON-serialisable payload read by the bootstrap script."""
        return {"token": self.token, "baseUrl": self.base_url, "src": self.script_src}

    def bootstrap(self, config_id: str) -> str:
        """Return the inline script that injects the chat embed."""
        return CHAT_BOOTSTRAP % {"config_id": config_id}


class WidgetConfig(typ.Protocol):
    """Structural type shared by widget config objects."""

    name: typ.ClassVar[str]

    @property
    def enabled(self) -> bool: ...

    def client_config(self) -> dict[str, typ.Any]: ...

    def bootstrap(self, config_id: str) -> str: ...


class WidgetLoader:
    """Track widgets mounted on one page and render their embed markup."""

    def __init__(self) -> None:
        self._mounted: dict[str, WidgetConfig] = {}

    @property
    def mounted(self) -> list[str]:
        """Return names of mounted widgets in mount order."""
        return list(self._mounted)

    def is_mounted(self, name: str) -> bool:
        """Return ``True`` when a widget called ``name`` is mounted."""
        return name in self._mounted

    def mount(self, widget: WidgetConfig | None) -> bool:
        """Register ``widget`` for rendering.

        Returns
        -------
        bool
            ``True`` when the widget is mounted after the call. Missing or
            disabled configs (no key/token) are not mounted. Mounting the same
            name twice keeps the first config.
        """
        if widget is None or not widget.enabled:
            return False
        self._mounted.setdefault(widget.name, widget)
        return True

    def unmount(self, name: str) -> bool:
        """Remove a mounted widget, returning ``False`` if it was not mounted."""
        return self._mounted.pop(name, None) is not None

    def render(self) -> Markup:
        """Return config blocks and bootstrap scripts for mounted widgets."""
        parts: list[str] = []
        for name, widget in self._mounted.items():
            config_id = f"{name}-widget-config"
            payload = json.dumps(widget.client_config(), sort_keys=True)
            payload = payload.replace("</", "<\\/")
            parts.append(
                f'<script type="application/json" id="{escape(config_id)}">'
                f"{payload}</script>"
            )
            parts.append(f"<script>{widget.bootstrap(config_id)}</script>")
        return Markup("\n".join(parts))


__all__ = [
    "ChatWidgetConfig",
    "MapWidgetConfig",
    "WidgetConfig",
    "WidgetLoader",
]
