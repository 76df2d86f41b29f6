"""
Utilities Package

Organized by purpose:
- core: Gemini client (single-shot text generation)
- prompts: Centralized prompt templates
- monitoring: Logging, correlation ids, metrics
- errors: Exception taxonomy and error handling
- json_recovery: Lenient JSON array extraction from model output
- quiz_scoring: Quiz scoring and weak-topic analysis
- http: Shared outbound HTTP client
"""
