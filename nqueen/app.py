import threading
import traceback
import uuid
from collections import OrderedDict

from flask import (Blueprint, Flask, current_app, jsonify, render_template,
                   request, session)

from .config import Config
from .helpers import BoardSize, InvalidConfiguration, WorkBoard
from .queens import MAX_INTERVAL_MS, MIN_INTERVAL_MS, Session
from .view import HtmlView

bp = Blueprint("nqueen", __name__)

SESSION_KEY = "nqueen_id"


class SessionStore:
    """
    Keeps one puzzle session per browser.

    The browser only holds a random key in its (signed) cookie; the session
    object itself stays in this process and is dropped on restart. At most
    `max_sessions` are kept: the least recently used one is evicted first.
    """

    def __init__(self, board_size, exclude_symmetry, interval_ms, max_sessions):
        if max_sessions < 1:
            raise ValueError(f"max_sessions must be at least 1, got {max_sessions}")
        self.board_size = board_size
        self.exclude_symmetry = exclude_symmetry
        self.interval_ms = interval_ms
        self.max_sessions = max_sessions
        self.__sessions = OrderedDict()
        self.__lock = threading.Lock()

    def __len__(self):
        return len(self.__sessions)

    def __contains__(self, key):
        return key in self.__sessions

    def get(self, key):
        with self.__lock:
            nq_session = self.__sessions.get(key)
            if nq_session is not None:
                self.__sessions.move_to_end(key)
                return nq_session

            nq_session = Session(self.board_size, self.exclude_symmetry,
                                 view=HtmlView(), interval_ms=self.interval_ms)
            self.__sessions[key] = nq_session
            while len(self.__sessions) > self.max_sessions:
                self.__sessions.popitem(last=False)
            return nq_session


def current_session():
    """Return the puzzle session of the requesting browser, creating it if needed."""
    key = session.get(SESSION_KEY)
    if key is None:
        key = uuid.uuid4().hex
        session[SESSION_KEY] = key
    return current_app.extensions["nqueen_sessions"].get(key)


def board_state(nq_session):
    with nq_session.lock:
        board = nq_session.work_board
        snapshot = board.snapshot()
        cursor = board.current_point()
        return {
            "board_size": board.board_size,
            "exclude_symmetry": board.exclude_symmetry,
            "cursor": {"x": cursor.x, "y": cursor.y},
            "states": [[state.value for state in row] for row in snapshot.states],
            "territory": [list(row) for row in snapshot.territory],
            "result_count": board.result_count(),
            "finished": board.is_finished,
            "interval_ms": nq_session.interval_ms,
            "board_html": nq_session.view.board_html,
        }


# ---------------- Routes ---------------- #

@bp.route("/")
def index():
    nq_session = current_session()
    with nq_session.lock:
        info = {
            "title": "N-Queens",
            "board_sizes": list(range(BoardSize.MIN, BoardSize.MAX + 1)),
            "min_interval_ms": MIN_INTERVAL_MS,
            "max_interval_ms": MAX_INTERVAL_MS,
            "solutions_html": list(nq_session.view.solutions),
        }
        info.update(board_state(nq_session))
    return render_template("index.html", info=info)


@bp.route("/board")
def board():
    return jsonify(board_state(current_session()))


@bp.route("/step", methods=["POST"])
def step():
    nq_session = current_session()
    try:
        with nq_session.lock:
            result = nq_session.run_step()
            data = board_state(nq_session)
            data.update(executed=result.executed, solved=result.solved)
            if result.solved:
                data["solution_html"] = nq_session.view.solutions[-1]
    except Exception:
        current_app.logger.error("step failed:\n%s", traceback.format_exc())
        return jsonify({"error": "Server error."}), 500

    return jsonify(data)


@bp.route("/all", methods=["POST"])
def run_all():
    nq_session = current_session()
    try:
        with nq_session.lock:
            executed = nq_session.run_all(current_app.config.get("RUN_ALL_MAX_STEPS"))
            data = board_state(nq_session)
            data.update(steps=executed, solutions_html=list(nq_session.view.solutions))
    except Exception:
        current_app.logger.error("run all failed:\n%s", traceback.format_exc())
        return jsonify({"error": "Server error."}), 500

    return jsonify(data)


@bp.route("/reset", methods=["POST"])
def reset():
    nq_session = current_session()
    data = request.get_json(silent=True) or {}

    # Values go to WorkBoard as sent; it rejects anything but a supported int.
    board_size = data.get("board_size", nq_session.work_board.board_size)
    exclude_symmetry = data.get("exclude_symmetry", nq_session.work_board.exclude_symmetry)
    if not isinstance(exclude_symmetry, bool):
        return jsonify({"error": f"exclude_symmetry must be true or false, got {exclude_symmetry!r}"}), 400

    try:
        with nq_session.lock:
            nq_session.reset(board_size, exclude_symmetry)
            state = board_state(nq_session)
    except InvalidConfiguration as e:
        current_app.logger.warning("rejected reset %r: %s", data, e)
        return jsonify({"error": str(e)}), 400

    current_app.logger.info("session reset: %dx%d, exclude_symmetry=%s",
                            board_size, board_size, exclude_symmetry)
    return jsonify(state)


@bp.route("/interval", methods=["POST"])
def interval():
    nq_session = current_session()
    data = request.get_json(silent=True) or {}

    try:
        nq_session.interval_ms = data["interval_ms"]
    except KeyError:
        return jsonify({"error": "interval_ms is required"}), 400
    except (ValueError, TypeError) as e:
        return jsonify({"error": str(e)}), 400

    return jsonify({"interval_ms": nq_session.interval_ms})


def create_app(config=None):
    """
    Flask application factory.

    Args:
        config (dict | None): Settings overriding those from Config.

    Returns:
        Flask: The configured application.

    Raises:
        InvalidConfiguration: If the default board settings are unsupported.
    """
    app = Flask(__name__, static_url_path="", static_folder="static")
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    WorkBoard(app.config["BOARD_SIZE"], app.config["EXCLUDE_SYMMETRY"])

    app.extensions["nqueen_sessions"] = SessionStore(
        app.config["BOARD_SIZE"], app.config["EXCLUDE_SYMMETRY"],
        app.config["INTERVAL_MS"], app.config["MAX_SESSIONS"],
    )
    app.register_blueprint(bp)
    return app


def main():
    app = create_app()
    app.run(debug=True, port=app.config["PORT"])


if __name__ == "__main__":
    main()
