# Model clients: each exposes generate(messages, params) -> (text, raw).
