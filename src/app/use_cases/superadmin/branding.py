"""Branding presets offered when a tenant is created"""

PALETTE_PRESETS = {
    "ocean": {
        "palette": {
            "primary": "#0891b2",
            "primaryForeground": "#012a3a",
            "accent": "#0ea5e9",
            "accentForeground": "#012a3a",
            "background": "#f3fbff",
            "foreground": "#0b1a36",
            "card": "#ffffff",
            "cardForeground": "#0b1a36",
            "sidebar": "#012a3a",
            "sidebarForeground": "#eaf6ff",
            "border": "#cfe6f6",
            "muted": "#e0f2fe",
            "mutedForeground": "#0f2d4a",
        },
        "dark": {
            "primary": "#38bdf8",
            "primaryForeground": "#012a3a",
            "accent": "#0ea5e9",
            "accentForeground": "#012a3a",
            "background": "#02131f",
            "foreground": "#e8f5ff",
            "card": "#0a1c2c",
            "cardForeground": "#e8f5ff",
            "sidebar": "#02131f",
            "sidebarForeground": "#e8f5ff",
            "border": "#0e2638",
            "muted": "#0b1f30",
            "mutedForeground": "#cde7ff",
        },
    },
    "plum": {
        "palette": {
            "primary": "#9b5de5",
            "primaryForeground": "#1f0b33",
            "accent": "#f15bb5",
            "accentForeground": "#1f0b33",
            "background": "#fdf4ff",
            "foreground": "#2b113f",
            "card": "#ffffff",
            "cardForeground": "#2b113f",
            "sidebar": "#2b113f",
            "sidebarForeground": "#fdf4ff",
            "border": "#e9d8fd",
            "muted": "#f3e8ff",
            "mutedForeground": "#311047",
        },
        "dark": {
            "primary": "#c084fc",
            "primaryForeground": "#1f0b33",
            "accent": "#f472b6",
            "accentForeground": "#1f0b33",
            "background": "#130720",
            "foreground": "#f5e9ff",
            "card": "#1f1230",
            "cardForeground": "#f5e9ff",
            "sidebar": "#0f0818",
            "sidebarForeground": "#f5e9ff",
            "border": "#261431",
            "muted": "#1c0f28",
            "mutedForeground": "#e7d5ff",
        },
    },
    "slate": {
        "palette": {
            "primary": "#0f172a",
            "primaryForeground": "#e2e8f0",
            "accent": "#475569",
            "accentForeground": "#e2e8f0",
            "background": "#f7f9fc",
            "foreground": "#0f172a",
            "card": "#ffffff",
            "cardForeground": "#0f172a",
            "sidebar": "#0f172a",
            "sidebarForeground": "#e2e8f0",
            "border": "#e2e8f0",
            "muted": "#e2e8f0",
            "mutedForeground": "#111827",
        },
        "dark": {
            "primary": "#1f2937",
            "primaryForeground": "#e5e7eb",
            "accent": "#334155",
            "accentForeground": "#e5e7eb",
            "background": "#020617",
            "foreground": "#e5e7eb",
            "card": "#0b1224",
            "cardForeground": "#e5e7eb",
            "sidebar": "#020617",
            "sidebarForeground": "#e5e7eb",
            "border": "#111827",
            "muted": "#0f172a",
            "mutedForeground": "#e5e7eb",
        },
    },
}

DEFAULT_PRESET = "ocean"


def branding_for(preset: str, logo_url=None) -> dict:
    chosen = PALETTE_PRESETS.get(preset) or PALETTE_PRESETS[DEFAULT_PRESET]
    return {"palette": chosen["palette"], "darkPalette": chosen["dark"], "logo_url": logo_url}
