from flask import jsonify


def page(total, items, limit, offset):
    """Standard list response."""
    return jsonify({
        "total": total,
        "items": [item.serialize() for item in items],
        "limit": limit,
        "offset": offset,
    })


def register_blueprints(app):
    """Register all API blueprints under API_PREFIX."""
    from .auth import bp as auth_bp
    from .health import bp as health_bp
    from .leases import bp as leases_bp
    from .maintenance import bp as maintenance_bp
    from .properties import bp as properties_bp
    from .tenants import bp as tenants_bp

    prefix = app.config.get("API_PREFIX", "/api")
    for bp in (auth_bp, health_bp, properties_bp, tenants_bp, leases_bp, maintenance_bp):
        app.register_blueprint(bp, url_prefix=prefix)
        app.logger.debug("Registered blueprint %s at %s", bp.name, prefix)
