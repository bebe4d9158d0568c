"""Closed classification vocabularies for project specs.

Each system type owns its own subtype enum, so a subtype can only ever be
paired with the system type it belongs to.
"""

from enum import Enum


class SystemType(str, Enum):
    """Primary MECE classification of the system."""

    REQUEST_RESPONSE = "request-response"  # Web App, REST API, CLI, Serverless
    EVENT_DRIVEN = "event-driven"          # Message Consumer, Webhook Handler, Scheduled Job
    STATEFUL = "stateful"                  # Document Editor, Workflow Builder, Dashboard
    LIBRARY = "library"                    # Utility Library, SDK, Framework
    DATA_INTENSIVE = "data-intensive"      # CRUD Application, ETL Pipeline, Reporting


class RequestResponseSubType(str, Enum):
    WEB_APP = "web-app"
    REST_API = "rest-api"
    GRAPHQL_API = "graphql-api"
    CLI = "cli"
    SERVERLESS = "serverless"


class EventDrivenSubType(str, Enum):
    MESSAGE_CONSUMER = "message-consumer"
    WEBHOOK_HANDLER = "webhook-handler"
    SCHEDULED_JOB = "scheduled-job"
    STREAM_PROCESSOR = "stream-processor"


class StatefulSubType(str, Enum):
    DOCUMENT_EDITOR = "document-editor"
    WORKFLOW_BUILDER = "workflow-builder"
    DASHBOARD = "dashboard"
    FORM_BUILDER = "form-builder"


class LibrarySubType(str, Enum):
    UTILITY = "utility"
    UI_COMPONENT = "ui-component"
    SDK = "sdk"
    FRAMEWORK = "framework"


class DataIntensiveSubType(str, Enum):
    CRUD_APP = "crud-app"
    ETL_PIPELINE = "etl-pipeline"
    SEARCH_SYSTEM = "search-system"
    REPORTING = "reporting"


# ── Secondary dimensions (cross-cutting) ──


class DeploymentModel(str, Enum):
    MONOLITH = "monolith"
    MODULAR_MONOLITH = "modular-monolith"
    MICROSERVICES = "microservices"
    SERVERLESS = "serverless"
    EDGE = "edge"


class StateComplexity(str, Enum):
    STATELESS = "stateless"
    SESSION = "session"
    WORKFLOW = "workflow"
    EVENT_SOURCED = "event-sourced"


class MultiTenancy(str, Enum):
    SINGLE_TENANT = "single-tenant"
    LOGICAL = "logical"
    PHYSICAL = "physical"
    HYBRID = "hybrid"


class ComplianceLevel(str, Enum):
    STANDARD = "standard"
    REGULATED = "regulated"
    HIGH_SECURITY = "high-security"


# ── Leaf configuration vocabularies ──


class BoundaryLayerType(str, Enum):
    CONTROLLER = "controller"
    HANDLER = "handler"
    RESOLVER = "resolver"
    MAPPER = "mapper"
    MIDDLEWARE = "middleware"
    CONSUMER = "consumer"
    PUBLISHER = "publisher"


class Language(str, Enum):
    TYPESCRIPT = "typescript"
    JAVA = "java"
    KOTLIN = "kotlin"
    PYTHON = "python"
    GO = "go"
    RUST = "rust"


class PackageManager(str, Enum):
    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    GRADLE = "gradle"
    MAVEN = "maven"
    PIP = "pip"
    CARGO = "cargo"


class MessageQueue(str, Enum):
    SQS = "sqs"
    RABBITMQ = "rabbitmq"
    KAFKA = "kafka"
    REDIS = "redis"
