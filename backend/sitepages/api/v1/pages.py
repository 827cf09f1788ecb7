# sitepages/api/v1/pages.py
from flask import current_app, jsonify, request
from flask_jwt_extended import jwt_required
from sitepages.application.cms.add_section import add_section
from sitepages.application.cms.create_page import create_page
from sitepages.application.cms.delete_page import delete_page
from sitepages.application.cms.delete_section import delete_section
from sitepages.application.cms.get_page import get_page_by_id, list_pages
from sitepages.application.cms.publish_page import publish_page, unpublish_page
from sitepages.application.cms.reorder_sections import reorder_sections
from sitepages.application.cms.resolve_page import resolve_page
from sitepages.application.cms.update_page import update_page
from sitepages.application.cms.update_section import update_section
from sitepages.domain.exceptions import InvalidPage
from sitepages.normalizers.page import normalize_page
from sitepages.rendering.renderers import render_page
from sitepages.utils.decorators import current_actor_id, roles_required
from sitepages.utils.optimistic_lock import read_precondition
from . import v1_bp


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        raise InvalidPage("Invalid request body")
    return data


def _page_response(page, message=None, status=200):
    body = {"success": True, "data": normalize_page(page, admin=True)}
    if message:
        body["message"] = message

    response = jsonify(body)
    response.status_code = status
    response.headers["ETag"] = f'"{page.revision}"'
    return response


# ------------------------
# Public
# ------------------------

@v1_bp.route("/pages/<slug>", methods=["GET"])
def get_page(slug):
    return jsonify({"success": True, "data": resolve_page(slug)})


@v1_bp.route("/pages/<slug>/render", methods=["GET"])
def render_public_page(slug):
    return jsonify({"success": True, "data": render_page(resolve_page(slug))})


# ------------------------
# Admin: pages
# ------------------------

@v1_bp.route("/admin/pages", methods=["GET"])
@jwt_required()
@roles_required("admin")
def admin_list_pages():
    return jsonify({
        "success": True,
        "data": [normalize_page(page, admin=True) for page in list_pages()],
    })


@v1_bp.route("/admin/pages/<page_id>", methods=["GET"])
@jwt_required()
@roles_required("admin")
def admin_get_page(page_id):
    return _page_response(get_page_by_id(page_id))


@v1_bp.route("/admin/pages", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_create_page():
    page = create_page(actor_id=current_actor_id(), data=_json_body())
    return _page_response(page, "Page created successfully", 201)


@v1_bp.route("/admin/pages/<page_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def admin_update_page(page_id):
    page = update_page(
        page_id=page_id,
        actor_id=current_actor_id(),
        data=_json_body(),
        precondition=read_precondition(request.headers),
    )
    return _page_response(page, "Page updated successfully")


@v1_bp.route("/admin/pages/<page_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def admin_delete_page(page_id):
    delete_page(page_id=page_id, actor_id=current_actor_id())
    return jsonify({"success": True, "message": "Page deleted successfully"}), 200


@v1_bp.route("/admin/pages/<page_id>/publish", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_publish_page(page_id):
    page = publish_page(
        page_id=page_id,
        actor_id=current_actor_id(),
        precondition=read_precondition(request.headers),
    )
    return _page_response(page, "Page published")


@v1_bp.route("/admin/pages/<page_id>/unpublish", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_unpublish_page(page_id):
    page = unpublish_page(
        page_id=page_id,
        actor_id=current_actor_id(),
        precondition=read_precondition(request.headers),
    )
    return _page_response(page, "Page unpublished")


# ------------------------
# Admin: sections
# ------------------------

@v1_bp.route("/admin/pages/<page_id>/sections", methods=["POST"])
@jwt_required()
@roles_required("admin")
def admin_add_section(page_id):
    page = add_section(
        page_id=page_id,
        actor_id=current_actor_id(),
        data=_json_body(),
        precondition=read_precondition(request.headers),
    )
    return _page_response(page, "Section added successfully")


@v1_bp.route("/admin/pages/<page_id>/sections/reorder", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def admin_reorder_sections(page_id):
    data = _json_body()
    if not isinstance(data, dict) or "sections" not in data:
        raise InvalidPage("Body must be {\"sections\": [section ids]}")

    page = reorder_sections(
        page_id=page_id,
        actor_id=current_actor_id(),
        section_ids=data["sections"],
        strict=current_app.config.get("STRICT_SECTION_REORDER", False),
        precondition=read_precondition(request.headers),
    )
    return _page_response(page, "Sections reordered successfully")


@v1_bp.route("/admin/pages/<page_id>/sections/<section_id>", methods=["PUT"])
@jwt_required()
@roles_required("admin")
def admin_update_section(page_id, section_id):
    page = update_section(
        page_id=page_id,
        section_id=section_id,
        actor_id=current_actor_id(),
        data=_json_body(),
        precondition=read_precondition(request.headers),
    )
    return _page_response(page, "Section updated successfully")


@v1_bp.route("/admin/pages/<page_id>/sections/<section_id>", methods=["DELETE"])
@jwt_required()
@roles_required("admin")
def admin_delete_section(page_id, section_id):
    page = delete_section(
        page_id=page_id,
        section_id=section_id,
        actor_id=current_actor_id(),
        precondition=read_precondition(request.headers),
    )
    return _page_response(page, "Section deleted successfully")
