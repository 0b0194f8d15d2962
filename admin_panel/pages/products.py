from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from admin_panel.core.base_page import BasePage
from admin_panel.core.product import CATEGORIES, STATUSES
from admin_panel.ui.helpers import form_field, products_table
from admin_panel.ui.ids import IDs

# Form field name -> control id, in the order feedback outputs are wired
PRODUCT_FORM_FIELDS = {
    "name": IDs.Control.PRODUCT_FORM_NAME,
    "category": IDs.Control.PRODUCT_FORM_CATEGORY,
    "price": IDs.Control.PRODUCT_FORM_PRICE,
    "stock": IDs.Control.PRODUCT_FORM_STOCK,
    "status": IDs.Control.PRODUCT_FORM_STATUS,
}


def build_product_modal() -> dbc.Modal:
    """
    Shared add/edit dialog. The title and field values are set by the
    callback that opens it.
    """
    body = dbc.ModalBody(
        [
            html.P(
                "Fill in the details for the product. Click save when you're done.",
                className="text-muted small",
            ),
            dbc.Row(
                [
                    form_field(
                        "Product Name",
                        dbc.Input(id=IDs.Control.PRODUCT_FORM_NAME, placeholder="Enter product name"),
                        IDs.Control.PRODUCT_FORM_NAME,
                        width=6,
                    ),
                    form_field(
                        "Category",
                        dbc.Select(
                            id=IDs.Control.PRODUCT_FORM_CATEGORY,
                            options=[{"label": "Select category", "value": ""}]
                            + [{"label": c, "value": c} for c in CATEGORIES],
                            value="",
                        ),
                        IDs.Control.PRODUCT_FORM_CATEGORY,
                        width=6,
                    ),
                ]
            ),
            dbc.Row(
                [
                    form_field(
                        "Price",
                        dbc.Input(
                            id=IDs.Control.PRODUCT_FORM_PRICE,
                            type="number",
                            step=0.01,
                            min=0,
                            placeholder="0.00",
                        ),
                        IDs.Control.PRODUCT_FORM_PRICE,
                        width=6,
                    ),
                    form_field(
                        "Stock",
                        dbc.Input(
                            id=IDs.Control.PRODUCT_FORM_STOCK,
                            type="number",
                            step=1,
                            min=0,
                            placeholder="0",
                        ),
                        IDs.Control.PRODUCT_FORM_STOCK,
                        width=6,
                    ),
                ]
            ),
            form_field(
                "Status",
                dbc.Select(
                    id=IDs.Control.PRODUCT_FORM_STATUS,
                    options=[{"label": s.capitalize(), "value": s} for s in STATUSES],
                    value="active",
                ),
                IDs.Control.PRODUCT_FORM_STATUS,
            ),
        ]
    )

    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle("Add New Product", id=IDs.Control.PRODUCT_MODAL_TITLE)),
            body,
            dbc.ModalFooter(
                [
                    dbc.Button("Cancel", id=IDs.Control.PRODUCT_FORM_CANCEL, color="secondary", outline=True),
                    dbc.Button("Save Product", id=IDs.Control.PRODUCT_FORM_SAVE, color="primary"),
                ]
            ),
        ],
        id=IDs.Control.PRODUCT_MODAL,
        is_open=False,
        size="lg",
    )


def build_delete_modal() -> dbc.Modal:
    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle("Confirm Deletion")),
            dbc.ModalBody(id=IDs.Control.DELETE_MODAL_BODY),
            dbc.ModalFooter(
                [
                    dbc.Button("Cancel", id=IDs.Control.DELETE_CANCEL, color="secondary", outline=True),
                    dbc.Button("Delete", id=IDs.Control.DELETE_CONFIRM, color="danger"),
                ]
            ),
        ],
        id=IDs.Control.DELETE_MODAL,
        is_open=False,
    )


class ProductsPage(BasePage):
    """
    Product inventory table with search, sort, pagination, bulk selection
    and add/edit/delete dialogs.

    Everything on screen is derived from the products store and the query
    state; see ui/callbacks/callbacks_products.py.
    """

    id = "products"
    label = "Products"
    path = "/data-table"
    icon = "bi-database"
    description = "Manage your product inventory"

    def layout(self, session):
        cfg = self.ctx.global_config

        actions = [
            dbc.Button(
                [html.I(className="bi bi-arrow-clockwise me-2"), "Refresh"],
                id=IDs.Control.PRODUCTS_REFRESH_BTN,
                color="secondary",
                outline=True,
                size="sm",
            ),
            dbc.Button(
                [html.I(className="bi bi-download me-2"), "Export CSV"],
                id=IDs.Control.PRODUCTS_EXPORT_BTN,
                color="secondary",
                outline=True,
                size="sm",
            ),
            dcc.Download(id=IDs.Control.PRODUCTS_DOWNLOAD),
            dbc.Button(
                [html.I(className="bi bi-plus-lg me-2"), "Add Product"],
                id=IDs.Control.PRODUCTS_ADD_BTN,
                color="primary",
                size="sm",
            ),
        ]

        controls = dbc.Row(
            [
                dbc.Col(
                    dbc.InputGroup(
                        [
                            dbc.InputGroupText(html.I(className="bi bi-search")),
                            dbc.Input(
                                id=IDs.Control.PRODUCTS_SEARCH,
                                placeholder="Search products...",
                                type="search",
                                value="",
                                debounce=0.3,
                            ),
                        ]
                    ),
                    md=5,
                ),
                dbc.Col(
                    html.Div(
                        [
                            dbc.Checkbox(
                                id=IDs.Control.PRODUCTS_SELECT_ALL,
                                label="Select page",
                                value=False,
                                className="me-3 mb-0",
                            ),
                            dbc.Button(
                                "Delete Selected",
                                id=IDs.Control.PRODUCTS_BULK_DELETE_BTN,
                                color="danger",
                                outline=True,
                                size="sm",
                                disabled=True,
                                className="me-3",
                            ),
                            dbc.Label("Rows", html_for=IDs.Control.PRODUCTS_PAGE_SIZE, className="me-2 mb-0 small"),
                            dbc.Select(
                                id=IDs.Control.PRODUCTS_PAGE_SIZE,
                                options=[{"label": str(n), "value": str(n)} for n in cfg.page_size_options],
                                value=str(cfg.default_page_size),
                                size="sm",
                                style={"width": "80px"},
                            ),
                        ],
                        className="d-flex align-items-center justify-content-md-end",
                    ),
                    md=7,
                ),
            ],
            className="g-2 p-3 border-bottom",
        )

        footer = html.Div(
            [
                html.Span(id=IDs.Control.PRODUCTS_SUMMARY, className="text-muted small"),
                dbc.Button(
                    "Clear search",
                    id=IDs.Control.PRODUCTS_CLEAR_SEARCH,
                    color="link",
                    size="sm",
                    style={"display": "none"},
                ),
            ],
            className="d-flex align-items-center gap-2 p-3 border-top",
        )

        return html.Div(
            [
                self.page_header(actions=actions),
                dbc.Card(
                    [
                        controls,
                        html.Div(
                            products_table(IDs.Control.PRODUCTS_TABLE, cfg.default_page_size),
                            className="px-2",
                        ),
                        footer,
                    ]
                ),
                build_product_modal(),
                build_delete_modal(),
            ]
        )
