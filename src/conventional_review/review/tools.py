REVIEW_COMMENT_TOOL_NAME = "post_review_comment"

REVIEW_COMMENT_TOOL = {
    "type": "function",
    "function": {
        "name": REVIEW_COMMENT_TOOL_NAME,
        "description": "Post a single inline review comment on a line of the diff.",
        "parameters": {
            "type": "object",
            "properties": {
                "line": {
                    "type": "integer",
                    "description": "Line number as shown at the start of the diff line.",
                },
                "comment": {
                    "type": "string",
                    "description": "The review comment in Markdown.",
                },
                "side": {
                    "type": "string",
                    "enum": ["LEFT", "RIGHT"],
                    "description": "LEFT for removed lines, RIGHT for added or unchanged lines.",
                },
            },
            "required": ["line", "comment", "side"],
        },
    },
}
