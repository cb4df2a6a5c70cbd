from __future__ import annotations

# Hook names the panel currently dispatches. Anything else is accepted with a
# warning so plugins can target hooks added in newer panel releases.
KNOWN_HOOKS = frozenset(
    {
        "on_user_connect",
        "on_user_disconnect",
        "on_user_nick_change",
        "on_user_quit",
        "on_channel_join",
        "on_channel_part",
        "on_channel_message",
        "on_channel_mode",
        "on_server_link",
        "on_server_split",
        "on_rehash",
        "on_oper_up",
        "on_ban_add",
        "on_ban_remove",
        "on_panel_startup",
        "on_api_request",
        "on_page_load",
        # Go backend lifecycle hooks
        "OnStartup",
        "OnShutdown",
        "OnUserListRequest",
        "OnChannelListRequest",
    }
)
