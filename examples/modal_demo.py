"""
Demonstration of the modal service with the pygame presenter.

Keys:
  A  open an alert          C  open a confirm        P  open a prompt
  Enter  confirm / submit the frontmost modal
  Esc    cancel the frontmost modal
  X      close every modal at once
Typing while a prompt is frontmost edits its text.

Dialogs stack: opening one while another is visible swaps them, closing the
top one swaps back.
"""
import asyncio
import pygame
from modal_service import ModalService, ModalEventType
from modal_service.ui.pygame_presenter import PygamePresenter
from modal_service.ui.settings import WIDTH, HEIGHT
from modal_service.views import PromptView

BG_COLOR = (22, 38, 46)


async def report(label, pending):
    try:
        print(f"{label} -> {await pending!r}")
    except Exception as e:
        print(f"{label} failed: {e}")


async def main():
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Modal stack demo")
    presenter = PygamePresenter(font=pygame.font.SysFont("Arial", 24))
    service = ModalService(presenter)
    service.event_listener.subscribe(
        lambda e: print(f"{e.type.name}: {e.view!r}"),
        types={ModalEventType.OPEN, ModalEventType.CLOSE},
    )
    tasks = set()

    def spawn(coro):
        task = asyncio.ensure_future(coro)
        tasks.add(task)
        task.add_done_callback(tasks.discard)

    running = True
    count = 0
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                top = service.stack.top()
                if isinstance(top, PromptView) and event.unicode and event.unicode.isprintable():
                    top.set_value(top.value + event.unicode)
                elif isinstance(top, PromptView) and event.key == pygame.K_BACKSPACE:
                    top.set_value(top.value[:-1])
                elif event.key == pygame.K_a:
                    count += 1
                    spawn(report("alert", service.alert({"title": f"Alert #{count}", "text": "Something happened."})))
                elif event.key == pygame.K_c:
                    count += 1
                    spawn(report("confirm", service.confirm({"title": f"Confirm #{count}", "text": "Proceed?"})))
                elif event.key == pygame.K_p:
                    count += 1
                    spawn(report("prompt", service.prompt({"title": f"Prompt #{count}", "placeholder": "Your name"})))
                elif event.key == pygame.K_x:
                    spawn(service.close())
                elif isinstance(top, PromptView) and event.key == pygame.K_RETURN:
                    top.submit()
                elif top is not None and event.key == pygame.K_RETURN:
                    top.confirm()
                elif top is not None and event.key == pygame.K_ESCAPE:
                    top.cancel()
        screen.fill(BG_COLOR)
        presenter.update()
        presenter.draw(screen)
        pygame.display.flip()
        await asyncio.sleep(1 / 60)
    pygame.quit()


if __name__ == "__main__":
    asyncio.run(main())
