"""Built-in permission catalog and role defaults."""

_CONTENT_MODULES = (
    ("actions", "Actions", "compliance action plan"),
    ("records", "Records", "records of processing activities"),
    ("privacy-policy", "Privacy policy", "privacy policy"),
    ("breach-analysis", "Breach analysis", "data breach analyses"),
    ("rights", "Rights requests", "data subject rights requests"),
    ("dpia", "DPIA", "data protection impact assessments"),
    ("documents", "Documents", "compliance documents"),
)


def _content_permissions() -> list[dict]:
    permissions = []
    for module, name, what in _CONTENT_MODULES:
        permissions.append(
            {
                "id": f"{module}.read",
                "category": "content",
                "name": f"View {name.lower()}",
                "description": f"Read the {what}",
            }
        )
        permissions.append(
            {
                "id": f"{module}.write",
                "category": "content",
                "name": f"Manage {name.lower()}",
                "description": f"Create and edit the {what}",
            }
        )
    return permissions


DEFAULT_SEED: dict = {
    "categories": [
        {"id": "dashboard", "name": "Dashboard", "color": "#3B82F6", "icon": "Home"},
        {"id": "content", "name": "Content Management", "color": "#10B981", "icon": "FileText"},
        {"id": "users", "name": "User Management", "color": "#F59E0B", "icon": "Users"},
        {"id": "administration", "name": "Administration", "color": "#EF4444", "icon": "Settings"},
        {"id": "security", "name": "Security", "color": "#8B5CF6", "icon": "Shield"},
        {"id": "system", "name": "System", "color": "#DC2626", "icon": "Server"},
    ],
    "permissions": [
        {"id": "dashboard.read", "category": "dashboard", "name": "View dashboard",
         "description": "Access the main dashboard"},
        {"id": "diagnostic.read", "category": "dashboard", "name": "View diagnostic",
         "description": "Access the GDPR diagnostic"},
        {"id": "diagnostic.write", "category": "dashboard", "name": "Answer diagnostic",
         "description": "Fill in the GDPR diagnostic questionnaire"},
        *_content_permissions(),
        {"id": "profile.read", "category": "users", "name": "View profile",
         "description": "View one's own profile"},
        {"id": "profile.write", "category": "users", "name": "Edit profile",
         "description": "Edit one's own profile"},
        {"id": "learning.read", "category": "users", "name": "View learning",
         "description": "Access the learning center"},
        {"id": "users.invite", "category": "users", "name": "Invite users",
         "description": "Invite collaborators into the company"},
        {"id": "users.manage", "category": "users", "name": "Manage users",
         "description": "Create, edit and remove users"},
        {"id": "admin.view", "category": "administration", "name": "View administration",
         "description": "Access the administration panel"},
        {"id": "company.manage", "category": "administration", "name": "Manage company",
         "description": "Manage company information"},
        {"id": "analytics.view", "category": "administration", "name": "View analytics",
         "description": "Access analytics and reports"},
        {"id": "settings.manage", "category": "administration", "name": "Manage settings",
         "description": "Change application settings"},
        {"id": "prompts.manage", "category": "administration", "name": "Manage prompts",
         "description": "Manage AI prompt templates"},
        {"id": "billing.read", "category": "administration", "name": "View billing",
         "description": "View subscription and invoices"},
        {"id": "billing.delete", "category": "administration", "name": "Cancel subscription",
         "description": "Cancel the company subscription"},
        {"id": "permissions.manage", "category": "security", "name": "Manage permissions",
         "description": "Grant and revoke user permissions"},
        {"id": "roles.manage", "category": "security", "name": "Manage roles",
         "description": "Change role default permissions"},
        {"id": "security.manage", "category": "security", "name": "Manage security",
         "description": "Advanced security settings"},
        {"id": "logs.view", "category": "system", "name": "View logs",
         "description": "Access system logs"},
        {"id": "system.manage", "category": "system", "name": "Manage system",
         "description": "Full system administration"},
        {"id": "any.delete", "category": "system", "name": "Delete data",
         "description": "Delete any data"},
    ],
    "role_defaults": {
        "collaborator": [
            "dashboard.read",
            "diagnostic.read",
            "actions.read",
            "records.read",
            "privacy-policy.read",
            "breach-analysis.read",
            "rights.read",
            "dpia.read",
            "documents.read",
            "profile.read",
            "profile.write",
            "learning.read",
        ],
        "admin": [
            "dashboard.read",
            "diagnostic.read",
            "diagnostic.write",
            *(f"{m}.{a}" for m, _, _ in _CONTENT_MODULES for a in ("read", "write")),
            "profile.read",
            "profile.write",
            "learning.read",
            "users.invite",
            "users.manage",
            "admin.view",
            "company.manage",
            "analytics.view",
            "settings.manage",
            "billing.read",
            "permissions.manage",
            "logs.view",
        ],
        # Owners hold the wildcard; the explicit list only matters if it is dropped.
        "owner": ["*"],
    },
}
