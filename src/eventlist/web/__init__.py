from __future__ import annotations
from flask import Blueprint, render_template

bp = Blueprint("web", __name__, template_folder="templates", static_folder="static",
               static_url_path="/static/web")


@bp.get("/")
def index():
    return render_template("index.html")


def register_web(app):
    app.register_blueprint(bp)
