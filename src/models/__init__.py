from .models import CommandResponse, LauncherConfig, McpServerEntry, ProjectChannel

__all__ = ['CommandResponse', 'LauncherConfig', 'McpServerEntry', 'ProjectChannel']
