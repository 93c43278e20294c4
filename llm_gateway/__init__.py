# LLM Gateway: authenticated HTTP façade over a chat-completion provider.
