"""
Hand-authored OpenAPI description of the REST endpoints.

This document is maintained by hand and is not generated from the routers;
update it together with ``api/endpoints/users.py``.
"""

from typing import Any

USER_SCHEMA_REF = {"$ref": "#/components/schemas/User"}
ERROR_SCHEMA_REF = {"$ref": "#/components/schemas/Error"}


def _error_response(description: str) -> dict[str, Any]:
    return {
        "description": description,
        "content": {"application/json": {"schema": ERROR_SCHEMA_REF}},
    }


OPENAPI_DOCUMENT: dict[str, Any] = {
    "openapi": "3.0.3",
    "info": {
        "title": "Users API",
        "description": "User lookup microservice over REST and GraphQL, backed by SQLAlchemy",
        "version": "1.0.0",
    },
    "servers": [{"url": "/"}],
    "paths": {
        "/users/{id}": {
            "get": {
                "summary": "Get a user by ID",
                "parameters": [
                    {
                        "name": "id",
                        "in": "path",
                        "required": True,
                        "schema": {"type": "integer"},
                    }
                ],
                "responses": {
                    "200": {
                        "description": "User found",
                        "content": {"application/json": {"schema": USER_SCHEMA_REF}},
                    },
                    "400": _error_response("ID is not an integer"),
                    "404": _error_response("User not found"),
                },
            }
        },
        "/users": {
            "get": {
                "summary": "Get all users",
                "responses": {
                    "200": {
                        "description": "List of users",
                        "content": {
                            "application/json": {
                                "schema": {"type": "array", "items": USER_SCHEMA_REF}
                            }
                        },
                    }
                },
            }
        },
    },
    "components": {
        "schemas": {
            "User": {
                "type": "object",
                "required": ["id", "name"],
                "properties": {
                    "id": {"type": "integer"},
                    "name": {"type": "string"},
                },
            },
            "Error": {
                "type": "object",
                "required": ["error"],
                "properties": {"error": {"type": "string"}},
            },
        }
    },
}
