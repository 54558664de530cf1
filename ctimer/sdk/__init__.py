# Read settings as ``ctimer.sdk.config.SDK_CONFIG``; a re-export here would go
# stale whenever the config module is reloaded.
