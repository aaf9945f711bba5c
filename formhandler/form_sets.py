"""
Bundled form configurations.

Each form ID maps to its email settings and declared fields. Field order is
the order fields appear in notifications. Set `FORMS_FILE` to a JSON document
with the same shape to replace the production set without a code change.
"""

PRODUCTION_FORMS = {
    "contact": {
        "label": "Contact Form",
        "to": "hello@example.com",
        "from": "{email}",
        "subject": "Contact Form from {name}",
        "fields": {
            "name": {"label": "Name", "required": True},
            "email": {"label": "Email", "required": True},
            "message": {"label": "Message", "required": True},
            "fax": {"label": "Fax Number", "honeypot": True},
            "ip_address": {"label": "IP Address", "method": "client-ip"},
            "system": {"label": "System", "method": "user-agent-summary"},
        },
    },
}

TEST_FORMS = {
    "intake": {
        "label": "Project Brief",
        "to": "hello@foo.dev",
        "from": "{email}",
        "subject": "Project Brief from {name}",
        "fields": {
            "name": {"label": "Name", "required": True},
            "email": {"label": "Email", "required": True},
            "company": {"label": "Company", "required": True},
            "phone": {"label": "Phone"},
            "website": {"label": "Website"},
            "budget": {"label": "Approximate Budget", "required": True},
            "start": {"label": "Ideal Start Date", "required": True},
            "description": {"label": "Project Description", "required": True},
        },
    },
    "support": {
        "label": "Support Request",
        "to": "hello@foo.dev",
        "from": "{email}",
        "subject": "Support Request from {name}",
        "fields": {
            "name": {"label": "Name", "required": True},
            "email": {"label": "Email", "required": True},
            "project": {"label": "Project", "required": True},
            "phone": {"label": "Phone"},
            "priority": {"label": "Priority"},
            "description": {"label": "Description", "required": True},
            "ip_address": {"label": "IP Address", "method": "client-ip"},
            "system": {"label": "System", "method": "user-agent-summary"},
        },
    },
    "contact": {
        "label": "Contact Form",
        "to": "hello@foo.dev",
        "from": "{email}",
        "subject": "Contact Form from {name}",
        "fields": {
            "name": {"label": "Name", "required": True},
            "email": {"label": "Email", "required": True},
            "message": {"label": "Message", "required": True},
            "fax": {"label": "Fax Number", "honeypot": True},
        },
    },
}
