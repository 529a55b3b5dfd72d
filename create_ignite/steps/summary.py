from typing import Optional

from create_ignite.log import get_logger
from create_ignite.project.options import CSSFramework, Framework, StateManagement
from create_ignite.steps.base import BaseStep
from create_ignite.templates.render import Renderer
from create_ignite.ui.base import success_source

log = get_logger(__name__)

FRAMEWORK_LINKS = {
    Framework.REACT: [("React", "https://react.dev/learn"), ("Vite", "https://vitejs.dev/guide/")],
    Framework.VUE: [("Vue", "https://vuejs.org/guide/"), ("Vite", "https://vitejs.dev/guide/")],
    Framework.NEXTJS: [("Next.js", "https://nextjs.org/docs")],
    Framework.NUXT: [("Nuxt", "https://nuxt.com/docs")],
    Framework.EXPRESS: [("Express", "https://expressjs.com/")],
    Framework.FASTIFY: [("Fastify", "https://fastify.dev/")],
    Framework.FULLSTACK: [
        ("React", "https://react.dev/learn"),
        ("Vite", "https://vitejs.dev/guide/"),
        ("Express", "https://expressjs.com/"),
    ],
}

CSS_FRAMEWORK_LINKS = {
    CSSFramework.TAILWIND: ("Tailwind CSS", "https://tailwindcss.com/docs"),
    CSSFramework.BOOTSTRAP: ("Bootstrap", "https://getbootstrap.com/docs/"),
    CSSFramework.MATERIAL_UI: ("Material-UI", "https://mui.com/"),
    CSSFramework.CHAKRA_UI: ("Chakra UI", "https://chakra-ui.com/"),
}

STATE_MANAGEMENT_LINKS = {
    StateManagement.REDUX: ("Redux Toolkit", "https://redux-toolkit.js.org/"),
    StateManagement.ZUSTAND: ("Zustand", "https://zustand.docs.pmnd.rs/"),
    StateManagement.MOBX: ("MobX", "https://mobx.js.org/"),
    StateManagement.PINIA: ("Pinia", "https://pinia.vuejs.org/"),
    StateManagement.VUEX: ("Vuex", "https://vuex.vuejs.org/"),
}


class SuccessSummary(BaseStep):
    """
    Tell the user what was created and how to get started.
    """

    step_type = "summary"
    display_name = "Summary"

    def __init__(self, *args, renderer: Optional[Renderer] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.renderer = renderer or Renderer()

    @property
    def links(self) -> list[tuple[str, str]]:
        """Documentation links for the chosen framework, CSS and state libraries."""
        links = list(FRAMEWORK_LINKS.get(self.config.framework, []))
        if self.config.css_framework in CSS_FRAMEWORK_LINKS:
            links.append(CSS_FRAMEWORK_LINKS[self.config.css_framework])
        if self.config.state_management in STATE_MANAGEMENT_LINKS:
            links.append(STATE_MANAGEMENT_LINKS[self.config.state_management])
        return links

    @property
    def tips(self) -> list[str]:
        config = self.config
        tips = []
        if config.is_react:
            tips.append("Use React DevTools browser extension for debugging")
        elif config.is_vue:
            tips.append("Use Vue DevTools browser extension for debugging")

        if config.css_framework == CSSFramework.TAILWIND:
            tips.append("Use Tailwind CSS IntelliSense VSCode extension")
        if config.install_eslint:
            tips.append(f"Run '{config.run_command} lint' to check code quality")
        if config.install_prettier:
            tips.append("Configure your editor to format on save")

        tips.append("Check package.json for all available scripts")
        tips.append("Read the documentation links above to get started")
        return tips

    def render(self) -> str:
        return self.renderer.render_template(
            "files/summary.txt",
            {
                **self.template_context,
                "state_management": self.config.state_management.value,
                "git_init": self.config.git_init,
                "backend": self.config.is_backend,
                "links": self.links,
                "tips": self.tips,
            },
        )

    async def run(self):
        await self.ui.send_message(self.render(), source=success_source)


__all__ = ["SuccessSummary"]
