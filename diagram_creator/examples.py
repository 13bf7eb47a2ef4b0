"""
Sample diagram requests, one per supported diagram type plus a raw
definition. Used by the command line (``--example``) and as fixtures.
"""

from typing import Any, Dict

FLOWCHART: Dict[str, Any] = {
    "type": "flowchart",
    "title": "User Registration Flow",
    "direction": "TD",
    "content": {
        "nodes": [
            {"id": "A", "label": "Start", "shape": "stadium"},
            {"id": "B", "label": "User fills form", "shape": "rect"},
            {"id": "C", "label": "Valid?", "shape": "diamond"},
            {"id": "D", "label": "Save to DB", "shape": "rect"},
            {"id": "E", "label": "Send Email", "shape": "rect"},
            {"id": "F", "label": "Show Error", "shape": "rect"},
            {"id": "G", "label": "End", "shape": "stadium"},
        ],
        "links": [
            {"from": "A", "to": "B"},
            {"from": "B", "to": "C"},
            {"from": "C", "to": "D", "label": "Yes"},
            {"from": "C", "to": "F", "label": "No", "style": "dotted"},
            {"from": "D", "to": "E"},
            {"from": "E", "to": "G"},
            {"from": "F", "to": "B", "style": "dotted"},
        ],
    },
}

SEQUENCE: Dict[str, Any] = {
    "type": "sequenceDiagram",
    "title": "API Authentication Flow",
    "content": {
        "actors": [
            {"id": "Client", "type": "actor"},
            {"id": "API", "type": "participant", "alias": "API Gateway"},
            {"id": "Auth", "type": "participant", "alias": "Auth Service"},
            {"id": "DB", "type": "participant", "alias": "Database"},
        ],
        "messages": [
            {"from": "Client", "to": "API", "label": "POST /login"},
            {"from": "API", "to": "Auth", "label": "Validate credentials"},
            {"from": "Auth", "to": "DB", "label": "Query user"},
            {"from": "DB", "to": "Auth", "label": "User data", "type": "dashed"},
            {"from": "Auth", "to": "API", "label": "JWT Token", "type": "dashed"},
            {"from": "API", "to": "Client", "label": "200 OK + Token", "type": "dashed"},
        ],
    },
}

CLASS: Dict[str, Any] = {
    "type": "classDiagram",
    "title": "E-Commerce Domain Model",
    "content": {
        "classes": [
            {
                "name": "User",
                "attributes": [
                    {"visibility": "-", "name": "id", "type": "UUID"},
                    {"visibility": "-", "name": "email", "type": "String"},
                    {"visibility": "-", "name": "password", "type": "String"},
                ],
                "methods": [
                    {"visibility": "+", "name": "login", "params": "credentials", "returnType": "Boolean"},
                    {"visibility": "+", "name": "logout", "returnType": "void"},
                ],
            },
            {
                "name": "Order",
                "attributes": [
                    {"visibility": "-", "name": "id", "type": "UUID"},
                    {"visibility": "-", "name": "total", "type": "Decimal"},
                    {"visibility": "-", "name": "status", "type": "OrderStatus"},
                ],
                "methods": [
                    {"visibility": "+", "name": "calculateTotal", "returnType": "Decimal"},
                    {"visibility": "+", "name": "addItem", "params": "product: Product", "returnType": "void"},
                ],
            },
            {
                "name": "Product",
                "attributes": [
                    {"visibility": "-", "name": "id", "type": "UUID"},
                    {"visibility": "-", "name": "name", "type": "String"},
                    {"visibility": "-", "name": "price", "type": "Decimal"},
                ],
                "methods": [
                    {"visibility": "+", "name": "getDetails", "returnType": "ProductDTO"},
                ],
            },
        ],
        "relationships": [
            {"from": "User", "to": "Order", "type": "association", "label": "places"},
            {"from": "Order", "to": "Product", "type": "composition", "label": "contains"},
        ],
    },
}

STATE: Dict[str, Any] = {
    "type": "stateDiagram-v2",
    "title": "Order State Machine",
    "content": {
        "states": [
            {"id": "Pending", "label": "Order Placed"},
            {"id": "Confirmed", "label": "Payment Confirmed"},
            {"id": "Processing", "label": "Being Prepared"},
            {"id": "Shipped", "label": "In Transit"},
            {"id": "Delivered", "label": "Delivered"},
            {"id": "Cancelled", "label": "Order Cancelled"},
        ],
        "transitions": [
            {"from": "[*]", "to": "Pending", "label": "New Order"},
            {"from": "Pending", "to": "Confirmed", "label": "Payment Success"},
            {"from": "Pending", "to": "Cancelled", "label": "Payment Failed"},
            {"from": "Confirmed", "to": "Processing", "label": "Start Processing"},
            {"from": "Processing", "to": "Shipped", "label": "Shipped"},
            {"from": "Shipped", "to": "Delivered", "label": "Delivered"},
            {"from": "Delivered", "to": "[*]"},
        ],
    },
}

ER: Dict[str, Any] = {
    "type": "erDiagram",
    "title": "Library Database Schema",
    "content": {
        "entities": [
            {
                "name": "BOOK",
                "attributes": [
                    {"type": "int", "name": "book_id", "key": "PK"},
                    {"type": "string", "name": "title"},
                    {"type": "string", "name": "isbn"},
                    {"type": "int", "name": "published_year"},
                ],
            },
            {
                "name": "AUTHOR",
                "attributes": [
                    {"type": "int", "name": "author_id", "key": "PK"},
                    {"type": "string", "name": "name"},
                    {"type": "string", "name": "country"},
                ],
            },
            {
                "name": "BORROWER",
                "attributes": [
                    {"type": "int", "name": "borrower_id", "key": "PK"},
                    {"type": "string", "name": "name"},
                    {"type": "string", "name": "email"},
                ],
            },
            {
                "name": "LOAN",
                "attributes": [
                    {"type": "int", "name": "loan_id", "key": "PK"},
                    {"type": "date", "name": "borrow_date"},
                    {"type": "date", "name": "return_date"},
                ],
            },
        ],
        "relationships": [
            {"from": "BOOK", "to": "AUTHOR", "label": "written_by"},
            {"from": "BOOK", "to": "LOAN", "cardinality": "||", "label": "borrowed_as"},
            {"from": "BORROWER", "to": "LOAN", "cardinality": "|o", "label": "has"},
        ],
    },
}

GANTT: Dict[str, Any] = {
    "type": "gantt",
    "title": "Website Redesign Project",
    "dateFormat": "YYYY-MM-DD",
    "content": {
        "title": "Website Redesign Project",
        "sections": [
            {
                "name": "Research & Planning",
                "tasks": [
                    {"name": "User Research", "id": "task1", "start": "2024-01-01", "duration": "7d"},
                    {"name": "Competitor Analysis", "id": "task2", "start": "2024-01-08", "duration": "5d"},
                    {"name": "Requirements Doc", "id": "task3", "start": "2024-01-15", "duration": "3d"},
                ],
            },
            {
                "name": "Design",
                "tasks": [
                    {"name": "Wireframes", "id": "task4", "start": "2024-01-18", "duration": "7d"},
                    {"name": "UI Design", "id": "task5", "start": "2024-01-25", "duration": "10d"},
                    {"name": "Design Review", "id": "task6", "start": "2024-02-04", "duration": "2d",
                     "status": "milestone"},
                ],
            },
            {
                "name": "Development",
                "tasks": [
                    {"name": "Frontend", "id": "task7", "start": "2024-02-06", "duration": "14d"},
                    {"name": "Backend API", "id": "task8", "start": "2024-02-06", "duration": "10d"},
                    {"name": "Integration", "id": "task9", "start": "2024-02-20", "duration": "5d"},
                ],
            },
            {
                "name": "Testing & Launch",
                "tasks": [
                    {"name": "QA Testing", "id": "task10", "start": "2024-02-25", "duration": "5d"},
                    {"name": "Bug Fixes", "id": "task11", "start": "2024-03-01", "duration": "3d"},
                    {"name": "Launch", "id": "task12", "start": "2024-03-04", "duration": "1d",
                     "status": "milestone"},
                ],
            },
        ],
    },
}

PIE: Dict[str, Any] = {
    "type": "pie",
    "title": "Monthly Budget Breakdown",
    "content": {
        "title": "Monthly Budget Breakdown",
        "data": [
            {"label": "Housing", "value": 35},
            {"label": "Food & Groceries", "value": 20},
            {"label": "Transportation", "value": 15},
            {"label": "Entertainment", "value": 10},
            {"label": "Savings", "value": 12},
            {"label": "Utilities", "value": 8},
        ],
    },
}

MINDMAP: Dict[str, Any] = {
    "type": "mindmap",
    "title": "Software Architecture",
    "content": {
        "root": {
            "text": "Software Architecture",
            "children": [
                {
                    "text": "Frontend",
                    "children": [
                        {"text": "React Components"},
                        {"text": "State Management"},
                        {"text": "Styling (CSS/SCSS)"},
                    ],
                },
                {
                    "text": "Backend",
                    "children": [
                        {"text": "API Layer"},
                        {"text": "Business Logic"},
                        {"text": "Data Access"},
                    ],
                },
                {
                    "text": "Database",
                    "children": [
                        {"text": "PostgreSQL"},
                        {"text": "Redis Cache"},
                    ],
                },
                {
                    "text": "DevOps",
                    "children": [
                        {"text": "CI/CD Pipeline"},
                        {"text": "Docker Containers"},
                        {"text": "Kubernetes"},
                    ],
                },
            ],
        },
    },
}

RAW_DEFINITION: Dict[str, Any] = {
    "type": "flowchart",
    "title": "Custom Diagram",
    "definition": (
        "flowchart LR\n"
        "    A[Hard edge] -->|Link text| B(Round edge)\n"
        "    B --> C{Decision}\n"
        "    C -->|One| D[Result one]\n"
        "    C -->|Two| E[Result two]\n"
        "    style A fill:#f9f,stroke:#333,stroke-width:4px\n"
        "    style B fill:#bbf,stroke:#333,stroke-width:2px\n"
        "    style C fill:#ff9,stroke:#333,stroke-width:2px"
    ),
}

EXAMPLES: Dict[str, Dict[str, Any]] = {
    "flowchart": FLOWCHART,
    "sequence": SEQUENCE,
    "class": CLASS,
    "state": STATE,
    "er": ER,
    "gantt": GANTT,
    "pie": PIE,
    "mindmap": MINDMAP,
    "raw": RAW_DEFINITION,
}
