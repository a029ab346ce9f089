def get_data(old_data):
    plugins = list(old_data.get("plugins", []))
    plugins.append(
        {
            "id": "jsx",
            "importer": "import vueJsx from '@vitejs/plugin-vue-jsx'",
            "initializer": "vueJsx()",
        }
    )
    return {**old_data, "plugins": plugins}
