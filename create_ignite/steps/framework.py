import json
import re
from os.path import isfile, join
from typing import Optional

from create_ignite.log import get_logger
from create_ignite.project.options import CSS_FRAMEWORK_LABELS, CSSFramework, Framework
from create_ignite.steps.base import BaseStep, StepError, StepErrorCode
from create_ignite.templates.render import Renderer

log = get_logger(__name__)

TAILWIND_IMPORT = 'import tailwindcss from "@tailwindcss/vite";\n'
TAILWIND_CSS = '@import "tailwindcss";\n'
BOOTSTRAP_IMPORT = "import 'bootstrap/dist/css/bootstrap.min.css';\n"
VITE_PLUGINS_PATTERN = re.compile(r"plugins:\s*\[(.*?)\]", re.DOTALL)

REACT_ROOT_ATTRIBUTES = {
    CSSFramework.TAILWIND: (
        'className="min-h-screen flex bg-gradient-to-br from-blue-500 to-purple-600 '
        'text-white items-center justify-center text-3xl font-bold"'
    ),
    CSSFramework.BOOTSTRAP: (
        'className="d-flex bg-dark text-white align-items-center justify-content-center" '
        'style={{ height: "100vh", fontSize: "2rem", fontWeight: "bold" }}'
    ),
    CSSFramework.NONE: (
        'style={{ minHeight: "100vh", display: "flex", justifyContent: "center", alignItems: "center", '
        'background: "linear-gradient(to bottom right, #3b82f6, #9333ea)", color: "white", '
        'fontSize: "2rem", fontWeight: "bold" }}'
    ),
}

VUE_ROOT_ATTRIBUTES = {
    CSSFramework.TAILWIND: (
        'class="min-h-screen flex bg-gradient-to-br from-blue-500 to-purple-600 '
        'text-white items-center justify-center text-3xl font-bold"'
    ),
    CSSFramework.BOOTSTRAP: (
        'class="d-flex bg-dark text-white align-items-center justify-content-center" '
        'style="height: 100vh; font-size: 2rem; font-weight: bold"'
    ),
    CSSFramework.NONE: (
        'style="min-height: 100vh; display: flex; justify-content: center; align-items: center; '
        "background: linear-gradient(to bottom right, #3b82f6, #9333ea); color: white; "
        'font-size: 2rem; font-weight: bold"'
    ),
}

ESLINT_CONFIG = {
    "env": {
        "browser": True,
        "es2021": True,
        "node": True,
    },
    "extends": ["eslint:recommended"],
    "parserOptions": {
        "ecmaVersion": "latest",
        "sourceType": "module",
    },
    "rules": {},
}

PRETTIER_CONFIG = {
    "semi": True,
    "trailingComma": "es5",
    "singleQuote": False,
    "printWidth": 100,
    "tabWidth": 2,
    "useTabs": True,
}


def add_tailwind_plugin(vite_config: str) -> str:
    """
    Register the Tailwind plugin in a Vite config.

    Leaves configs that already import the plugin untouched.

    :param vite_config: Contents of vite.config.(js|ts).
    :return: Updated contents.
    """
    if "@tailwindcss/vite" in vite_config:
        return vite_config

    vite_config = VITE_PLUGINS_PATTERN.sub(
        lambda m: f"plugins: [{m.group(1)}, tailwindcss()]" if m.group(1).strip() else "plugins: [tailwindcss()]",
        vite_config,
        count=1,
    )
    return TAILWIND_IMPORT + vite_config


def add_bootstrap_import(main_source: str) -> str:
    """Prepend the Bootstrap stylesheet import, unless already there."""
    if "bootstrap" in main_source:
        return main_source
    return BOOTSTRAP_IMPORT + main_source


class FrameworkSetup(BaseStep):
    """
    Configure the generated project for the chosen options.

    Wires up the CSS framework, replaces the generator's App component
    with a welcome page and writes linter, formatter and environment
    config files. Problems with individual files are reported as warnings.
    """

    step_type = "framework-setup"
    display_name = "Framework setup"

    def __init__(self, *args, renderer: Optional[Renderer] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.renderer = renderer or Renderer()

    async def run(self):
        await self.send_message("Configuring framework...")
        try:
            if self.config.is_react or self.config.is_vue:
                await self.setup_css_framework()
                await self.setup_app_component()
            await self.setup_config_files()
        except StepError:
            raise
        except Exception as err:
            log.error(f"Framework setup failed: {err}", exc_info=True)
            raise StepError(
                f"Failed to setup framework: {err}",
                StepErrorCode.FRAMEWORK_SETUP_FAILED,
            ) from err

        await self.send_message("Framework configured")

    def path(self, *parts: str) -> str:
        return join(self.project_dir, *parts)

    def read_file(self, *parts: str) -> str:
        with open(self.path(*parts), "r", encoding="utf-8") as fp:
            return fp.read()

    def write_file(self, content: str, *parts: str):
        with open(self.path(*parts), "w", encoding="utf-8", newline="\n") as fp:
            fp.write(content)

    async def setup_css_framework(self):
        css = self.config.css_framework
        if css == CSSFramework.TAILWIND:
            await self.setup_tailwind()
        elif css == CSSFramework.BOOTSTRAP:
            await self.setup_bootstrap()
        elif css == CSSFramework.MATERIAL_UI:
            await self.send_message("Material-UI ready to use. Import components as needed.")
        elif css == CSSFramework.CHAKRA_UI:
            await self.send_message("Chakra UI ready to use. Wrap your app with ChakraProvider.")

    async def setup_tailwind(self):
        if self.config.framework in (Framework.REACT, Framework.VUE):
            vite_config = f"vite.config.{'ts' if self.config.is_typescript else 'js'}"
            try:
                self.write_file(add_tailwind_plugin(self.read_file(vite_config)), vite_config)
            except OSError as err:
                log.debug(f"Could not update {vite_config}: {err}")
                await self.warn(f"Could not update {vite_config}. Please add Tailwind plugin manually.")

        try:
            self.write_file(TAILWIND_CSS, "src", "index.css")
        except OSError as err:
            log.debug(f"Could not write src/index.css: {err}")
            await self.warn("Could not create index.css. Please add Tailwind import manually.")

    @property
    def entry_file(self) -> str:
        if self.config.is_vue:
            return f"main.{'ts' if self.config.is_typescript else 'js'}"
        return f"main.{'tsx' if self.config.is_typescript else 'jsx'}"

    async def setup_bootstrap(self):
        try:
            self.write_file(add_bootstrap_import(self.read_file("src", self.entry_file)), "src", self.entry_file)
            self.write_file("", "src", "index.css")
        except OSError as err:
            log.debug(f"Could not set up Bootstrap: {err}")
            await self.warn("Could not setup Bootstrap. Please import manually.")

    async def setup_app_component(self):
        framework = self.config.framework
        if framework == Framework.REACT:
            template = "files/App.jsx"
            target = f"App.{'tsx' if self.config.is_typescript else 'jsx'}"
            attributes = REACT_ROOT_ATTRIBUTES
        elif framework == Framework.VUE:
            template = "files/App.vue"
            target = "App.vue"
            attributes = VUE_ROOT_ATTRIBUTES
        else:
            # Next.js and Nuxt keep their own page structure
            return

        css = self.config.css_framework
        content = self.renderer.render_template(
            template,
            {
                **self.template_context,
                "root_attributes": attributes.get(css, attributes[CSSFramework.NONE]),
                "built_with": f" + {CSS_FRAMEWORK_LABELS[css]}" if css != CSSFramework.NONE else "",
            },
        )
        try:
            self.write_file(content, "src", target)
        except OSError as err:
            log.debug(f"Could not write src/{target}: {err}")
            await self.warn("Could not update App component")

    async def setup_config_files(self):
        if self.config.install_eslint:
            await self.write_config(".eslintrc.json", ESLINT_CONFIG, "ESLint config")

        if self.config.install_prettier:
            await self.write_config(".prettierrc.json", PRETTIER_CONFIG, "Prettier config")

        if self.config.is_backend:
            env = self.renderer.render_template("files/env", self.template_context)
            try:
                if not isfile(self.path(".env")):
                    self.write_file(env, ".env")
                self.write_file(env, ".env.example")
            except OSError as err:
                log.debug(f"Could not write .env: {err}")
                await self.warn("Could not create .env file")

    async def write_config(self, file_name: str, config: dict, description: str):
        try:
            self.write_file(json.dumps(config, indent=2) + "\n", file_name)
        except OSError as err:
            log.debug(f"Could not write {file_name}: {err}")
            await self.warn(f"Could not create {description}")


__all__ = ["add_tailwind_plugin", "add_bootstrap_import", "FrameworkSetup"]
