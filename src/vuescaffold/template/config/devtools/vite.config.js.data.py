def get_data(old_data):
    plugins = list(old_data.get("plugins", []))
    plugins.append(
        {
            "id": "devtools",
            "importer": "import vueDevTools from 'vite-plugin-vue-devtools'",
            "initializer": "vueDevTools()",
        }
    )
    return {**old_data, "plugins": plugins}
