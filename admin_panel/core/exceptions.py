class AdminPanelError(Exception):
    """Base exception for all admin_panel errors"""
    pass

class ConfigError(AdminPanelError):
    """Invalid or inconsistent global.json"""
    pass

class NotFoundError(AdminPanelError):
    """
    A mutation targeted a record id that is not in the store
    """

    def __init__(self, record_id: str, kind: str = "Record"):
        self.record_id = record_id
        self.kind = kind
        super().__init__(f"{kind} '{record_id}' not found")

class StaleOverwriteError(AdminPanelError):
    """
    A store-replacing operation (refresh) resolved after the store had
    already moved on, either because it was mutated or because a newer
    refresh was started
    """
    pass

class AuthenticationError(AdminPanelError):
    """Credentials did not match"""
    pass
