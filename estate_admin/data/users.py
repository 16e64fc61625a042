"""Default back office accounts."""

from estate_admin.models.user import User, UserRole, permissions_for

_ACCOUNTS = [
    ("1", "Admin User", "admin@builderbookings.com", UserRole.SUPER_ADMIN, "2023-01-01T00:00:00Z", None),
    ("2", "John Smith", "john.smith@example.com", UserRole.AGENT, "2023-02-15T00:00:00Z", "2023-07-20T00:00:00Z"),
    ("3", "Sarah Johnson", "sarah.johnson@example.com", UserRole.AGENT, "2023-03-10T00:00:00Z", "2023-07-15T00:00:00Z"),
    ("4", "Mohammed Al-Rashid", "mohammed.rashid@builderbookings.com", UserRole.AGENT, "2023-02-01T00:00:00Z", "2024-03-06T00:00:00Z"),
    ("5", "Emily Chen", "emily.chen@builderbookings.com", UserRole.EDITOR, "2023-03-01T00:00:00Z", "2024-03-07T00:00:00Z"),
    ("6", "David Wilson", "david.wilson@builderbookings.com", UserRole.VIEWER, "2023-05-01T00:00:00Z", "2024-03-04T00:00:00Z"),
]


def initial_users() -> list[User]:
    return [
        User.model_validate({
            "id": user_id,
            "name": name,
            "email": email,
            "role": role,
            "status": "Active",
            "permissions": permissions_for(role),
            "created_at": created_at,
            "last_login": last_login,
        })
        for user_id, name, email, role, created_at, last_login in _ACCOUNTS
    ]
