"""Infrastructure adapters: platform REST client, repositories, notification publishers."""
