import logging

import uvicorn

from siteaudit.api.server import create_app
from siteaudit.container import Container


def main(container: Container = None):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    container = container or Container()
    app = create_app(container)
    host = container.config.API_HOST()
    port = container.config.API_PORT()
    logging.info("SiteAudit API listening on %s:%s", host, port)
    uvicorn.run(app, host=host, port=int(port))


if __name__ == '__main__':
    main()
