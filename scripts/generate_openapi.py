#!/usr/bin/env python3
"""
OpenAPI specification generator for the deals API.

Builds an OpenAPI 3.0 document for ``POST /deals`` and ``GET /bindings`` from
the Pydantic request and response models.
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Type

import yaml
from pydantic import BaseModel

REF_TEMPLATE = "#/components/schemas/{model}"


def model_schema(model: Type[BaseModel], schemas: Dict[str, Any]) -> Dict[str, Any]:
    """
    Register ``model`` (and the models it references) under ``schemas``.

    Returns:
        A ``$ref`` object pointing at the registered schema
    """
    schema = model.model_json_schema(by_alias=True, ref_template=REF_TEMPLATE)
    for name, definition in schema.pop("$defs", {}).items():
        schemas[name] = definition
    schemas[model.__name__] = schema
    return {"$ref": REF_TEMPLATE.format(model=model.__name__)}


def json_response(description: str, schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"description": description, "content": {"application/json": {"schema": schema}}}


def get_openapi_spec() -> Dict[str, Any]:
    """
    Generate OpenAPI specification from the models.

    Returns:
        OpenAPI specification dictionary
    """
    sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

    from deals_service.models import CreateDealOutput, CreateDealRequest, ErrorOutput

    schemas: Dict[str, Any] = {}
    request_ref = model_schema(CreateDealRequest, schemas)
    created_ref = model_schema(CreateDealOutput, schemas)
    error_ref = model_schema(ErrorOutput, schemas)

    return {
        "openapi": "3.0.3",
        "info": {
            "title": "Deals API",
            "description": "Create deals and discover the public bindings of the deals service.",
            "version": "1.0.0",
        },
        "tags": [
            {"name": "Deals", "description": "Deal management operations"},
            {"name": "Bindings", "description": "Public runtime bindings"},
        ],
        "paths": {
            "/deals": {
                "post": {
                    "summary": "Create a new deal",
                    "description": (
                        "Validates the payload, requires the expiration to be at least "
                        "7 days from today and stores the deal under a new KSUID."
                    ),
                    "operationId": "createDeal",
                    "tags": ["Deals"],
                    "requestBody": {
                        "required": True,
                        "content": {
                            "application/json": {
                                "schema": request_ref,
                                "examples": {
                                    "basic_deal": {
                                        "summary": "Basic deal",
                                        "value": {
                                            "userId": "merchant-123",
                                            "title": "50% Off Pizza",
                                            "originalPrice": 20,
                                            "discount": 50,
                                            "logoFileKey": "logos/pizza.png",
                                            "category": "foodDrink",
                                            "expiration": "2030-01-01T00:00:00Z",
                                        },
                                    },
                                },
                            },
                        },
                    },
                    "responses": {
                        "200": json_response("Deal created", created_ref),
                        "400": json_response("Malformed body, schema violation or expiration too soon", error_ref),
                        "409": json_response("Deal already exists", error_ref),
                        "500": json_response("Service misconfigured or unexpected error", error_ref),
                        "502": json_response("Deal store failure", error_ref),
                    },
                },
            },
            "/bindings": {
                "get": {
                    "summary": "Public runtime bindings",
                    "operationId": "getBindings",
                    "tags": ["Bindings"],
                    "responses": {
                        "200": json_response("Bindings of the service", {"type": "object"}),
                    },
                },
            },
        },
        "components": {"schemas": schemas},
    }


def validate_openapi_spec(spec: Dict[str, Any]) -> bool:
    """
    Validate the OpenAPI specification.

    Args:
        spec: OpenAPI specification to validate

    Returns:
        True if valid, False otherwise
    """
    for field in ("openapi", "info", "paths"):
        if field not in spec:
            print(f"Error: Missing required field '{field}' in OpenAPI spec")
            return False

    for field in ("title", "version"):
        if field not in spec["info"]:
            print(f"Error: Missing required field 'info.{field}' in OpenAPI spec")
            return False

    for path, operations in spec["paths"].items():
        for method, operation in operations.items():
            if not operation.get("responses"):
                print(f"Error: {method.upper()} {path} declares no responses")
                return False

    print("OpenAPI specification validation passed")
    return True


def main():
    """Main function for the OpenAPI generator script."""
    parser = argparse.ArgumentParser(description="Generate OpenAPI specification for the deals API")
    parser.add_argument("--format", choices=["json", "yaml"], default="yaml", help="Output format (default: yaml)")
    parser.add_argument("--out-destination", default=".", help="Output directory (default: current directory)")
    parser.add_argument("--out-filename", help="Output filename (default: openapi.{format})")
    parser.add_argument("--validate", action="store_true", help="Validate the generated specification")

    args = parser.parse_args()

    print("Generating OpenAPI specification...")
    spec = get_openapi_spec()
    spec["info"]["x-generated"] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "generator": "deals-service/openapi-generator",
    }

    if args.validate and not validate_openapi_spec(spec):
        sys.exit(1)

    filename = args.out_filename or f"openapi.{args.format}"
    output_dir = Path(args.out_destination)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / filename

    with open(output_path, "w", encoding="utf-8") as f:
        if args.format == "json":
            json.dump(spec, f, indent=2, ensure_ascii=False)
        else:
            yaml.dump(spec, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    print(f"OpenAPI specification written to: {output_path}")
    print(f"Schema definitions: {len(spec['components']['schemas'])}")


if __name__ == "__main__":
    main()
