"""MCP protocol value types."""

from mcp_schema.types.base import (
    LATEST_PROTOCOL_VERSION,
    PROGRESS_TOKEN,
    REQUEST_ID,
    SUPPORTED_PROTOCOL_VERSIONS,
    Cursor,
    EmptyResult,
    NotificationParams,
    PaginatedParams,
    PaginatedResult,
    ProgressToken,
    RequestId,
    RequestMeta,
    RequestParams,
    Result,
)
from mcp_schema.types.completion import (
    REFERENCE,
    CompleteArgument,
    CompleteContext,
    CompleteParams,
    CompleteResult,
    Completion,
    PromptReference,
    Reference,
    ResourceTemplateReference,
)
from mcp_schema.types.content import (
    CONTENT_BLOCK,
    RESOURCE_CONTENTS,
    SAMPLING_CONTENT,
    Annotations,
    AudioContent,
    BlobResourceContents,
    ContentBlock,
    EmbeddedResource,
    ImageContent,
    ResourceContents,
    ResourceLink,
    Role,
    SamplingContent,
    TextContent,
    TextResourceContents,
    UnrecognizedContent,
    UnrecognizedSamplingContent,
)
from mcp_schema.types.elicitation import ElicitAction, ElicitParams, ElicitResult
from mcp_schema.types.initialization import (
    ClientCapabilities,
    Implementation,
    InitializeParams,
    InitializeResult,
    PromptsCapability,
    ResourcesCapability,
    RootsCapability,
    ServerCapabilities,
    ToolsCapability,
)
from mcp_schema.types.notifications import (
    CancelledNotificationParams,
    LoggingLevel,
    LoggingMessageParams,
    ProgressNotificationParams,
    SetLevelParams,
)
from mcp_schema.types.prompts import (
    GetPromptParams,
    GetPromptResult,
    ListPromptsResult,
    Prompt,
    PromptArgument,
    PromptMessage,
)
from mcp_schema.types.resources import (
    ListResourcesResult,
    ListResourceTemplatesResult,
    ReadResourceParams,
    ReadResourceResult,
    Resource,
    ResourceTemplate,
    ResourceUpdatedParams,
    SubscribeParams,
    UnsubscribeParams,
)
from mcp_schema.types.roots import ListRootsResult, Root
from mcp_schema.types.sampling import (
    CreateMessageParams,
    CreateMessageResult,
    IncludeContext,
    ModelHint,
    ModelPreferences,
    SamplingMessage,
)
from mcp_schema.types.tools import (
    CallToolParams,
    CallToolResult,
    ListToolsResult,
    Tool,
    ToolAnnotations,
)

__all__ = [
    "Annotations",
    "AudioContent",
    "BlobResourceContents",
    "CONTENT_BLOCK",
    "CallToolParams",
    "CallToolResult",
    "CancelledNotificationParams",
    "ClientCapabilities",
    "CompleteArgument",
    "CompleteContext",
    "CompleteParams",
    "CompleteResult",
    "Completion",
    "ContentBlock",
    "CreateMessageParams",
    "CreateMessageResult",
    "Cursor",
    "ElicitAction",
    "ElicitParams",
    "ElicitResult",
    "EmbeddedResource",
    "EmptyResult",
    "GetPromptParams",
    "GetPromptResult",
    "ImageContent",
    "Implementation",
    "IncludeContext",
    "InitializeParams",
    "InitializeResult",
    "LATEST_PROTOCOL_VERSION",
    "ListPromptsResult",
    "ListResourceTemplatesResult",
    "ListResourcesResult",
    "ListRootsResult",
    "ListToolsResult",
    "LoggingLevel",
    "LoggingMessageParams",
    "ModelHint",
    "ModelPreferences",
    "NotificationParams",
    "PROGRESS_TOKEN",
    "PaginatedParams",
    "PaginatedResult",
    "ProgressNotificationParams",
    "ProgressToken",
    "Prompt",
    "PromptArgument",
    "PromptMessage",
    "PromptReference",
    "PromptsCapability",
    "REFERENCE",
    "REQUEST_ID",
    "RESOURCE_CONTENTS",
    "ReadResourceParams",
    "ReadResourceResult",
    "Reference",
    "RequestId",
    "RequestMeta",
    "RequestParams",
    "Resource",
    "ResourceContents",
    "ResourceLink",
    "ResourceTemplate",
    "ResourceTemplateReference",
    "ResourceUpdatedParams",
    "ResourcesCapability",
    "Result",
    "Role",
    "Root",
    "RootsCapability",
    "SAMPLING_CONTENT",
    "SUPPORTED_PROTOCOL_VERSIONS",
    "SamplingContent",
    "SamplingMessage",
    "ServerCapabilities",
    "SetLevelParams",
    "SubscribeParams",
    "TextContent",
    "TextResourceContents",
    "Tool",
    "ToolAnnotations",
    "ToolsCapability",
    "UnrecognizedContent",
    "UnrecognizedSamplingContent",
    "UnsubscribeParams",
]
