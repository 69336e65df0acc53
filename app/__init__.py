"""taskdesk: task creation endpoint and today dashboard for loan applications."""
