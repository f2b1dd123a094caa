"""核心共享类型."""
