async def get_data(old_data):
    extras = list(old_data.get("extras", []))
    extras.append(
        {
            "importer": "import skipFormatting from '@vue/eslint-config-prettier/skip-formatting'",
            "config": "skipFormatting",
        }
    )
    return {**old_data, "extras": extras}
