from __future__ import annotations

__all__ = ["IDs", "feedback_id", "event_delete_id", "calendar_day_id", "toast_demo_id"]


class IDs:
    class Store:
        AUTH = "auth-storage"
        PRODUCTS = "products-store"
        QUERY_STATE = "query-state"
        EDITING_ID = "product-editing-id"
        PENDING_DELETE = "product-pending-delete"
        EVENTS = "events-store"
        NOTIFICATION = "notification-store"
        REFRESH_TICKET = "products-refresh-ticket"

    class Control:
        # Shell
        URL = "url"
        SHELL = "app-shell"
        TOAST = "app-toast"
        LOGOUT_BTN = "logout-btn"

        # Login
        LOGIN_EMAIL = "login-email"
        LOGIN_PASSWORD = "login-password"
        LOGIN_BTN = "login-btn"
        LOGIN_ERROR = "login-error"

        # Dashboard
        DASHBOARD_TIME_RANGE = "dashboard-time-range"
        DASHBOARD_TIME_LABEL = "dashboard-time-label"
        DASHBOARD_INVENTORY_GRAPH = "dashboard-inventory-graph"
        DASHBOARD_INVENTORY_TEXT = "dashboard-inventory-text"
        DASHBOARD_LOW_STOCK = "dashboard-low-stock"
        DASHBOARD_DOWNLOAD_BTN = "dashboard-download-btn"
        DASHBOARD_DOWNLOAD = "dashboard-download"

        # Products table
        PRODUCTS_TABLE = "products-table"
        PRODUCTS_SEARCH = "products-search"
        PRODUCTS_CLEAR_SEARCH = "products-clear-search"
        PRODUCTS_PAGE_SIZE = "products-page-size"
        PRODUCTS_SELECT_ALL = "products-select-all"
        PRODUCTS_SUMMARY = "products-summary"
        PRODUCTS_BULK_DELETE_BTN = "products-bulk-delete-btn"
        PRODUCTS_REFRESH_BTN = "products-refresh-btn"
        PRODUCTS_ADD_BTN = "products-add-btn"
        PRODUCTS_EXPORT_BTN = "products-export-btn"
        PRODUCTS_DOWNLOAD = "products-download"

        # Product add/edit modal
        PRODUCT_MODAL = "product-modal"
        PRODUCT_MODAL_TITLE = "product-modal-title"
        PRODUCT_FORM_NAME = "product-form-name"
        PRODUCT_FORM_CATEGORY = "product-form-category"
        PRODUCT_FORM_PRICE = "product-form-price"
        PRODUCT_FORM_STOCK = "product-form-stock"
        PRODUCT_FORM_STATUS = "product-form-status"
        PRODUCT_FORM_SAVE = "product-form-save"
        PRODUCT_FORM_CANCEL = "product-form-cancel"

        # Product delete confirmation
        DELETE_MODAL = "product-delete-modal"
        DELETE_MODAL_BODY = "product-delete-modal-body"
        DELETE_CONFIRM = "product-delete-confirm"
        DELETE_CANCEL = "product-delete-cancel"

        # Calendar
        CALENDAR_DATE = "calendar-date"
        CALENDAR_VIEW_MODE = "calendar-view-mode"
        CALENDAR_PREV = "calendar-prev"
        CALENDAR_NEXT = "calendar-next"
        CALENDAR_TODAY = "calendar-today"
        CALENDAR_RANGE_LABEL = "calendar-range-label"
        CALENDAR_GRID = "calendar-grid"
        CALENDAR_DAY_TITLE = "calendar-day-title"
        CALENDAR_DAY_EVENTS = "calendar-day-events"
        CALENDAR_UPCOMING = "calendar-upcoming"
        CALENDAR_ADD_BTN = "calendar-add-btn"

        # Calendar add-event modal
        EVENT_MODAL = "event-modal"
        EVENT_FORM_TITLE = "event-form-title"
        EVENT_FORM_DATE = "event-form-date"
        EVENT_FORM_START = "event-form-start"
        EVENT_FORM_END = "event-form-end"
        EVENT_FORM_LOCATION = "event-form-location"
        EVENT_FORM_DESCRIPTION = "event-form-description"
        EVENT_FORM_ATTENDEES = "event-form-attendees"
        EVENT_FORM_CATEGORY = "event-form-category"
        EVENT_FORM_ERROR = "event-form-error"
        EVENT_FORM_SAVE = "event-form-save"
        EVENT_FORM_CANCEL = "event-form-cancel"

        # Forms page
        FORM_FIRST_NAME = "profile-first-name"
        FORM_LAST_NAME = "profile-last-name"
        FORM_EMAIL = "profile-email"
        FORM_PHONE = "profile-phone"
        FORM_DOB = "profile-dob"
        FORM_GENDER = "profile-gender"
        FORM_COUNTRY = "profile-country"
        FORM_ADDRESS = "profile-address"
        FORM_TERMS = "profile-terms"
        FORM_NEWSLETTER = "profile-newsletter"
        FORM_SUBMIT = "profile-submit"
        FORM_RESET = "profile-reset"
        FORM_RESULT = "profile-result"

        # UI components gallery
        UI_DATE_PICKER = "ui-date-picker"
        UI_DATE_LABEL = "ui-date-label"
        UI_SLIDER = "ui-slider"
        UI_SLIDER_LABEL = "ui-slider-label"

    class Pattern:
        # pattern-matching "type" strings
        EVENT_DELETE = "calendar-event-delete"
        CALENDAR_DAY = "calendar-day"
        TOAST_DEMO = "ui-toast-demo"


def feedback_id(field_id: str) -> str:
    return f"{field_id}-feedback"


def event_delete_id(event_id: str) -> dict:
    return {"type": IDs.Pattern.EVENT_DELETE, "index": event_id}


def calendar_day_id(iso_date: str) -> dict:
    return {"type": IDs.Pattern.CALENDAR_DAY, "index": iso_date}


def toast_demo_id(level: str) -> dict:
    return {"type": IDs.Pattern.TOAST_DEMO, "index": level}
