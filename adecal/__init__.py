import logging

from flask import Flask, Response, abort, current_app

from .config import ServerConfig
from .constants import CALENDAR_CONTENT_TYPE, NO_CACHE
from .exceptions import CalendarNotFoundError, MergedCalendarNotFoundError
from .service import CalendarFeedService

logger = logging.getLogger(__name__)


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, content_type="text/plain; charset=utf-8")


def _service() -> CalendarFeedService:
    return current_app.config["FEED_SERVICE"]


def describe_calendars(service: CalendarFeedService, base_url: str = "") -> str:
    """Plain-text listing of available calendars and merges."""
    lines = ["Available calendars:"]
    calendars = service.locator.list_calendars()
    if calendars:
        lines.extend(f"  - {base_url}/calendar/{name}" for name in calendars)
    else:
        lines.append("  (none exported yet)")

    merges = service.config.calendar_merges
    if merges:
        lines.append("")
        lines.append("Merged calendars:")
        for name, sources in merges.items():
            lines.append(
                f"  - {base_url}/calendar/{name} (merges: {', '.join(sources)})"
            )
    return "\n".join(lines)


def create_app(config: ServerConfig | None = None):
    if config is None:
        config = ServerConfig.from_env()

    app = Flask(__name__)
    app.config["SERVER_CONFIG"] = config
    app.config["FEED_SERVICE"] = CalendarFeedService(config)

    @app.route("/", methods=["GET"], provide_automatic_options=False)
    def index():
        """Health check with the list of calendars."""
        body = "Calendar Server Running\n\n" + describe_calendars(_service())
        return _text(body + "\n")

    @app.route("/calendar", methods=["GET"], provide_automatic_options=False)
    def calendar_root():
        # Explicit rule, otherwise routing redirects to /calendar/
        abort(404)

    @app.route("/calendar/", methods=["GET"], provide_automatic_options=False)
    def calendar_name_missing():
        return _text("Calendar name required", 400)

    @app.route("/calendar/<name>", methods=["GET"], provide_automatic_options=False)
    def get_calendar(name: str):
        """Serve the latest (or merged) calendar file."""
        try:
            feed = _service().get_feed(name)
        except MergedCalendarNotFoundError as e:
            logger.warning(str(e))
            return _text(str(e), 404)
        except CalendarNotFoundError:
            logger.info(f"Calendar not found: {name}")
            return _text("Calendar not found", 404)

        return Response(
            feed.content,
            content_type=CALENDAR_CONTENT_TYPE,
            headers={
                "Content-Disposition": f'attachment; filename="{feed.filename}"',
                "Cache-Control": NO_CACHE,
                "Access-Control-Allow-Origin": "*",
            },
        )

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(error):
        return _text("Not Found", 404)

    return app
