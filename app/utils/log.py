import json
import logging
import datetime

from app.config.settings import settings


class StructuredLogger:

    def __init__(self, logger_name='StructuredLogger', service='dsa-admin-backend'):
        self.service = service
        self.logger = logging.getLogger(logger_name)
        self.logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

        # re-importing the module must not stack handlers
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter('%(message)s')
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
        self.logger.propagate = False


    def _log(self, level, message, exc_info=None, **kwargs):
        log_entry = {
            'timestamp': datetime.datetime.now().isoformat(),
            'level': level.upper(),
            'message': message,
            'service': self.service,
            'environment': settings.ENVIRONMENT,
            **kwargs
        }
        json_log = json.dumps(log_entry, default=str)
        getattr(self.logger, level)(json_log, exc_info=exc_info) # Invoke the method corresponding to the level


    def info(self, message, **kwargs):
        self._log('info', message, **kwargs)

    def warning(self, message, **kwargs):
        self._log('warning', message, **kwargs)

    def error(self, message, **kwargs):
        self._log('error', message, **kwargs)

    def debug(self, message, **kwargs):
        self._log('debug', message, **kwargs)

app_logger = StructuredLogger('DsaAdminLogger')
