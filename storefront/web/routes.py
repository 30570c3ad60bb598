"""
Page routes.

    /app/createproduct   static product form, no submission
    /app/testform        create a product from the form, then set its SKU
    /app/testmainscreen  list products five at a time; POST generates one

Browsers get rendered pages. Clients that ask for application/json get
the remote payloads echoed back as JSON.
"""

import logging
from typing import Any, Dict, Optional

from flask import (
    Blueprint,
    Response,
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    url_for,
)

from ..common.constants import PRODUCT_STATUSES
from ..shopify import (
    ShopifyAPIClient,
    ShopifyRequestError,
    WorkflowResult,
    create_product_with_sku,
    fetch_all_products,
    generate_product,
    product_numeric_id,
)
from .pagination import paginate, parse_page_number

logger = logging.getLogger(__name__)

pages = Blueprint("pages", __name__, template_folder="templates")


def _client() -> ShopifyAPIClient:
    return current_app.extensions["shopify_client"]


def wants_json() -> bool:
    """True when the Accept header prefers JSON over HTML."""
    accept = request.accept_mimetypes
    best = accept.best_match(["application/json", "text/html"])
    return best == "application/json" and accept[best] > accept["text/html"]


def _json_result(result: WorkflowResult, variants_key: str) -> Response:
    body: Dict[str, Any] = {"product": result.product, variants_key: result.variants}
    if result.error:
        body["error"] = result.error
    response = jsonify(body)
    response.status_code = result.status_code
    return response


@pages.route("/", methods=["GET"])
def index() -> Response:
    """Send the app root to the product list."""
    return redirect(url_for("pages.main_screen"))


# ---------- STATIC FORM ----------


@pages.route("/app/createproduct", methods=["GET", "POST"])
def create_product_stub() -> str:
    """Render the placeholder product form. Submitting it does nothing."""
    return render_template("createproduct.html")


# ---------- PRODUCT FORM ----------


@pages.route("/app/testform", methods=["GET", "POST"])
def product_form():
    """Render the product form; on POST create the product and set its SKU."""
    form = {
        "title": request.form.get("title", ""),
        "status": request.form.get("status", PRODUCT_STATUSES[0]),
        "sku": request.form.get("sku", ""),
    }

    if request.method == "GET":
        return render_template("testform.html", form=form, statuses=PRODUCT_STATUSES, result=None)

    result = create_product_with_sku(_client(), form["title"], form["status"], form["sku"])

    if wants_json():
        return _json_result(result, "variants")

    if result.ok:
        flash("Product created successfully!")

    html = render_template("testform.html", form=form, statuses=PRODUCT_STATUSES, result=result)
    return html, result.status_code


# ---------- PRODUCT LIST ----------


def _fetch_error() -> Response:
    if wants_json():
        response = jsonify({"error": "Failed to fetch products"})
        response.status_code = 500
        return response
    return Response("Failed to fetch products", status=500)


@pages.route("/app/testmainscreen", methods=["GET", "POST"])
def main_screen():
    """List products; on POST generate a random snowboard first."""
    result: Optional[WorkflowResult] = None
    per_page = current_app.config["PRODUCTS_PER_PAGE"]

    if request.method == "POST":
        result = generate_product(_client())
        if wants_json():
            return _json_result(result, "variant")
        if result.ok:
            flash("Product created")

    list_error = None
    try:
        products = fetch_all_products(_client(), current_app.config["PRODUCTS_FETCH_LIMIT"])
    except ShopifyRequestError as e:
        logger.warning("Product list unavailable: %s", e)
        # A generated product still has to be shown, or a retry would duplicate it
        if result is None:
            return _fetch_error()
        products = []
        list_error = str(e)

    page = paginate(products, parse_page_number(request.args.get("page")), per_page)

    if wants_json():
        return jsonify({
            "products": [product.to_dict() for product in page.items],
            "page": page.number,
            "total_pages": page.total_pages,
            "has_next": page.has_next,
            "has_previous": page.has_previous,
        })

    if list_error:
        status_code = 500
    else:
        status_code = result.status_code if result else 200

    product_id = product_numeric_id((result.product or {}).get("id")) if result else ""
    html = render_template(
        "testmainscreen.html",
        page=page,
        result=result,
        product_id=product_id,
        list_error=list_error,
    )
    return html, status_code
