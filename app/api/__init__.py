"""HTTP surface: v1 API, function endpoints, dashboard routes."""
