from __future__ import annotations

import logging
from numbers import Integral
from typing import Any, Mapping

from flask import Flask, jsonify, request

# Project-local algorithms
from .contrast import evaluate_contrast, first_sufficient_contrast
from .convert import hex_to_hsb
from .defaults import DEFAULT_BACKGROUND, DEFAULT_LOCK_HEX, DEFAULT_STEPS, MAX_STEPS, canonical_request
from .errors import ConfigurationError, InvalidColorError
from .ramp import RampRequest, generate_ramp, major_steps

log = logging.getLogger(__name__)


def parse_steps(val: str | None, max_steps: int) -> int:
    try:
        n = int(val) if val is not None else DEFAULT_STEPS
    except ValueError:
        raise ConfigurationError("steps must be an integer") from None
    if n > max_steps:
        raise ConfigurationError(f"steps must be ≤ {max_steps}")
    return n


def ramp_payload(ramp_request: RampRequest, background: str) -> dict[str, Any]:
    """Ramp + contrast annotations, as served by /ramp."""
    colors = generate_ramp(ramp_request)
    contrast = evaluate_contrast(colors, background)
    candidate = first_sufficient_contrast(contrast)
    return {
        "background": background,
        "colors": [c.to_dict(formats=True) for c in colors],
        "contrast": [r.to_dict() for r in contrast],
        "candidate": candidate.step if candidate is not None else None,
        "major_count": len(major_steps(colors)),
    }


# ----------------------------- Flask app ----------------------------------


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    app.config.update(
        BACKGROUND=DEFAULT_BACKGROUND,
        LOCK_HEX=DEFAULT_LOCK_HEX,
        MAX_STEPS=MAX_STEPS,
    )
    app.config.from_prefixed_env("RAMP")
    if overrides:
        app.config.update(overrides)

    @app.route("/hsb")
    def hsb():
        # display readout: malformed input degrades to zero HSB
        value = request.args.get("hex", app.config["LOCK_HEX"])
        c = hex_to_hsb(value)
        return jsonify({"hex": value, "h": c.h, "s": c.s, "b": c.b})

    @app.route("/ramp", methods=["GET", "POST"])
    def ramp():
        background = app.config["BACKGROUND"]
        try:
            if request.method == "POST":
                body = request.get_json(silent=True)
                if not isinstance(body, dict):
                    raise ConfigurationError("expected a JSON object body")
                ramp_request = RampRequest.from_mapping(body.get("props"), body.get("options"))
                if isinstance(ramp_request.steps, Integral) and ramp_request.steps > app.config["MAX_STEPS"]:
                    raise ConfigurationError(f"steps must be ≤ {app.config['MAX_STEPS']}")
            else:
                lock = request.args.get("lock", app.config["LOCK_HEX"])
                steps = parse_steps(request.args.get("steps"), app.config["MAX_STEPS"])
                ramp_request = canonical_request(lock, steps)
            payload = ramp_payload(ramp_request, background)
        except InvalidColorError as exc:
            return jsonify({"error": str(exc)}), 400
        except ConfigurationError as exc:
            return jsonify({"error": f"invalid ramp request: {exc}"}), 400
        except Exception as exc:
            log.exception("Ramp generation failed")
            return jsonify({"error": str(exc)}), 500

        log.info(
            "ramp: %d colors, lock=%s, candidate=%s",
            len(payload["colors"]),
            ramp_request.lock_hex,
            payload["candidate"],
        )
        return jsonify(payload)

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
