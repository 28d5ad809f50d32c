"""Static rules document written to .cursor/rules on every setup."""

RULES_TEMPLATE = """---
description: Project memory for AI collaboration
globs:
alwaysApply: true
---

# MCP Cursor Companion

This project keeps a structured memory in `.mcp/ai_memory.json`.
Read it before making changes and keep it current afterwards.

## Memory Layout

- `project_overview` - name, purpose, current version, key technologies
- `architecture` - components, data flow, key patterns
- `code_conventions` - naming, structure and documentation rules
- `user_interaction_guidelines` - how the user likes to collaborate
- `feature_registry` - implemented features and where they live
- `decision_log` - decisions with rationale and impact
- `current_development_focus` - priorities, known issues, upcoming changes
- `session_history` - short summaries of past work sessions
- `detailed_memories` - append-only log of typed, tagged memories
- `ai_guidance` - hints on how to search this file

## Before You Start

1. Read `project_overview` and `current_development_focus`.
2. Check `feature_registry` for existing work related to the request.
3. Search `detailed_memories` by `type` and `tags` for prior solutions.
4. Follow `code_conventions` in everything you write.

## After You Finish

1. Record the change with `mcp-companion add --interactive`.
2. Use type `feature`, `decision` or `session` when it applies so the
   matching registry is updated too.
3. Bump the version with `mcp-companion update --version <x.y.z>` on release.
4. Track planned work with `mcp-companion update --focus "<change>"`.

## Commands

- `mcp-companion setup` - create the memory file and this rules file
- `mcp-companion memory` - show a summary of the memory
- `mcp-companion memory --section <name>` - show one section as JSON
- `mcp-companion update --version <v> --focus <text>` - update fields
- `mcp-companion add --interactive` - append a memory entry

## Tips for Best Results

- Be specific in descriptions; they become feature and decision names.
- Keep tags short and reusable (e.g. `auth`, `api`, `perf`).
- Never edit or delete existing `detailed_memories` entries.
"""
