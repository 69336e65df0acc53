"""Platform table names and column lists (schema lives in the platform)."""

TABLE_APPLICATIONS = "applications"
TABLE_TASKS = "tasks"

APPLICATION_COLUMNS = "id, tenant_id"
TASK_LIST_COLUMNS = "id, type, application_id, due_at, status, description"
