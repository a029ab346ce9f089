TS_VUE_PARSER = """{
    name: 'app/vue-typescript',
    files: ['**/*.vue'],
    languageOptions: {
      parserOptions: {
        parser: tseslint.parser,
      },
    },
  }"""


def get_data(old_data):
    extras = list(old_data.get("extras", []))
    extras.append(
        {
            "importer": "import tseslint from 'typescript-eslint'",
            "config": "...tseslint.configs.recommended",
        }
    )
    extras.append({"importer": "", "config": TS_VUE_PARSER})
    return {**old_data, "extras": extras}
