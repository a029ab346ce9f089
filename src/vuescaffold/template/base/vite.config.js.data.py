def get_data(old_data):
    plugins = list(old_data.get("plugins", []))
    plugins.append(
        {
            "id": "vue",
            "importer": "import vue from '@vitejs/plugin-vue'",
            "initializer": "vue()",
        }
    )
    return {**old_data, "plugins": plugins}
