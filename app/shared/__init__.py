"""Cross-cutting helpers: request context, telemetry, utilities."""
