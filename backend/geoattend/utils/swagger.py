"""Swagger/OpenAPI configuration for the application."""

# Swagger UI configuration
SWAGGER_URL = '/api/docs'
API_URL = '/api/swagger.json'

def _json_body(schema: dict) -> dict:
    return {
        "required": True,
        "content": {"application/json": {"schema": schema}}
    }

def _json_response(description: str, schema: dict) -> dict:
    return {
        "description": description,
        "content": {"application/json": {"schema": schema}}
    }

def _error(description: str) -> dict:
    return _json_response(description, {"$ref": "#/components/schemas/Error"})

def generate_swagger_spec():
    """Generate OpenAPI/Swagger specification."""
    session_id_param = {
        "name": "session_id",
        "in": "path",
        "required": True,
        "schema": {"type": "string"}
    }

    return {
        "openapi": "3.0.0",
        "info": {
            "title": "Geo-Attend API",
            "description": "Attendance check-in gated by session expiry, a 50 m geofence and a device fingerprint",
            "version": "1.0.0"
        },
        "servers": [
            {
                "url": "http://127.0.0.1:5000/api",
                "description": "Development server"
            }
        ],
        "components": {
            "schemas": {
                "Session": {
                    "type": "object",
                    "properties": {
                        "id": {"type": "string"},
                        "title": {"type": "string"},
                        "latitude": {"type": "number"},
                        "longitude": {"type": "number"},
                        "createdAt": {"type": "string", "format": "date-time"},
                        "expiresAt": {"type": "string", "format": "date-time"},
                        "isActive": {"type": "boolean"}
                    }
                },
                "AttendanceEntry": {
                    "type": "object",
                    "properties": {
                        "nim": {"type": "string"},
                        "name": {"type": "string"},
                        "createdAt": {"type": "string", "format": "date-time"},
                        "manualOverride": {"type": "boolean"}
                    }
                },
                "Error": {
                    "type": "object",
                    "properties": {
                        "error": {"type": "boolean"},
                        "message": {"type": "string"},
                        "status_code": {"type": "integer"}
                    }
                },
                "Success": {
                    "type": "object",
                    "properties": {
                        "error": {"type": "boolean", "default": False},
                        "message": {"type": "string"}
                    }
                }
            }
        },
        "paths": {
            "/session/create": {
                "post": {
                    "tags": ["Sessions"],
                    "summary": "Create a two hour attendance session",
                    "requestBody": _json_body({
                        "type": "object",
                        "required": ["title", "latitude", "longitude"],
                        "properties": {
                            "title": {"type": "string"},
                            "latitude": {"type": "number"},
                            "longitude": {"type": "number"}
                        }
                    }),
                    "responses": {
                        "201": _json_response("Session created", {
                            "type": "object",
                            "properties": {"sessionId": {"type": "string"}}
                        }),
                        "400": _error("Validation error")
                    }
                }
            },
            "/session/list": {
                "get": {
                    "tags": ["Sessions"],
                    "summary": "List sessions, newest first",
                    "responses": {
                        "200": _json_response("Sessions", {
                            "type": "array",
                            "items": {"$ref": "#/components/schemas/Session"}
                        })
                    }
                }
            },
            "/session/{session_id}": {
                "get": {
                    "tags": ["Sessions"],
                    "summary": "Get a session",
                    "parameters": [session_id_param],
                    "responses": {
                        "200": _json_response("Session", {"$ref": "#/components/schemas/Session"}),
                        "404": _error("Session not found")
                    }
                }
            },
            "/session/{session_id}/attendance": {
                "get": {
                    "tags": ["Sessions"],
                    "summary": "Students checked in to a session",
                    "parameters": [session_id_param],
                    "responses": {
                        "200": _json_response("Attendance", {
                            "type": "array",
                            "items": {"$ref": "#/components/schemas/AttendanceEntry"}
                        })
                    }
                }
            },
            "/session/{session_id}/qr": {
                "get": {
                    "tags": ["Sessions"],
                    "summary": "QR image for the session id",
                    "parameters": [session_id_param],
                    "responses": {
                        "200": _json_response("QR image", {
                            "type": "object",
                            "properties": {
                                "sessionId": {"type": "string"},
                                "qrImage": {"type": "string", "description": "Base64 encoded PNG data URL"}
                            }
                        }),
                        "404": _error("Session not found")
                    }
                }
            },
            "/attendance/submit": {
                "post": {
                    "tags": ["Attendance"],
                    "summary": "Self-service check-in",
                    "requestBody": _json_body({
                        "type": "object",
                        "required": ["sessionId", "nim", "latitude", "longitude", "deviceId"],
                        "properties": {
                            "sessionId": {"type": "string"},
                            "nim": {"type": "string"},
                            "latitude": {"type": "number"},
                            "longitude": {"type": "number"},
                            "deviceId": {"type": "string"}
                        }
                    }),
                    "responses": {
                        "200": _json_response("Created or already attended", {"$ref": "#/components/schemas/Success"}),
                        "400": _error("Expired, too far or invalid request"),
                        "403": _error("Submitted from a different device"),
                        "404": _error("Session or student not found")
                    }
                }
            },
            "/attendance/bulk-toggle": {
                "post": {
                    "tags": ["Attendance"],
                    "summary": "Mark or unmark several students",
                    "requestBody": _json_body({
                        "type": "object",
                        "required": ["sessionId", "nims", "action"],
                        "properties": {
                            "sessionId": {"type": "string"},
                            "nims": {"type": "array", "items": {"type": "string"}, "minItems": 1},
                            "action": {"type": "string", "enum": ["mark", "unmark"]}
                        }
                    }),
                    "responses": {
                        "200": _json_response("Unmarked", {
                            "type": "object",
                            "properties": {
                                "success": {"type": "boolean"},
                                "deleted": {"type": "integer"}
                            }
                        }),
                        "201": _json_response("Marked", {
                            "type": "object",
                            "properties": {
                                "success": {"type": "boolean"},
                                "created": {"type": "integer"},
                                "results": {"type": "array", "items": {"$ref": "#/components/schemas/AttendanceEntry"}},
                                "skipped": {"type": "array", "items": {"type": "string"}}
                            }
                        }),
                        "400": _error("Missing or invalid fields"),
                        "404": _error("Session not found (mark only)")
                    }
                }
            },
            "/student": {
                "get": {
                    "tags": ["Students"],
                    "summary": "Roster ordered by NIM",
                    "responses": {
                        "200": _json_response("Roster", {
                            "type": "array",
                            "items": {
                                "type": "object",
                                "properties": {
                                    "nim": {"type": "string"},
                                    "name": {"type": "string"}
                                }
                            }
                        })
                    }
                }
            },
            "/student/history/{nim}": {
                "get": {
                    "tags": ["Students"],
                    "summary": "Sessions a student attended",
                    "parameters": [{
                        "name": "nim",
                        "in": "path",
                        "required": True,
                        "schema": {"type": "string"}
                    }],
                    "responses": {
                        "200": _json_response("History", {
                            "type": "array",
                            "items": {
                                "type": "object",
                                "properties": {
                                    "sessionId": {"type": "string"},
                                    "title": {"type": "string"},
                                    "createdAt": {"type": "string", "format": "date-time"}
                                }
                            }
                        }),
                        "404": _error("Student not found")
                    }
                }
            },
            "/dashboard/export": {
                "get": {
                    "tags": ["Dashboard"],
                    "summary": "Attendance matrix as CSV",
                    "responses": {
                        "200": {
                            "description": "BOM-prefixed, fully quoted CSV attachment",
                            "content": {"text/csv": {"schema": {"type": "string"}}}
                        }
                    }
                }
            }
        }
    }
