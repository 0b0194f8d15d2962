"""
Dash front end for the admin panel.

Import the app factory from admin_panel.ui.dash_app. The package itself stays
empty so that pages can use ui.ids / ui.helpers without loading the app.
"""
