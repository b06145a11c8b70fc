import logging


class Component:
    """
    컴포넌트 기본 클래스

    Checker, Config 등 mcheck 구성 요소의 기반이 되는 클래스입니다.
    부모 컴포넌트의 이름과 로그 핸들러를 물려받습니다.
    """

    # Logger 기본 포맷
    _default_log_format = '%(asctime)s : %(name)s [%(levelname)s] %(message)s - %(lineno)s'
    # log level 매핑
    _log_levels = {
        'CRITICAL': logging.CRITICAL,
        'ERROR': logging.ERROR,
        'WARNING': logging.WARNING,
        'INFO': logging.INFO,
        'DEBUG': logging.DEBUG,
        'NOTSET': logging.NOTSET,
    }

    def __init__(self, name, parent=None):
        """
        컴포넌트 초기화

        Args:
            name: 컴포넌트 이름
            parent: 부모 컴포넌트 (None이면 최상위 컴포넌트)
        """
        self._parent = parent
        self._short_name = name
        self.handlers = []
        if parent is None:
            self.name = name
        else:
            self.name = parent.name + '-' + name
            self.handlers = list(parent.handlers)
        self.l = logging.getLogger(name=self.name)
        self.l: logging.Logger
        if parent is not None:
            # 부모와 같은 핸들러/레벨 사용
            for old in list(self.l.handlers):
                self.l.removeHandler(old)
            for handler in self.handlers:
                self.l.addHandler(handler)
            self.l.setLevel(parent.l.level)
            self.l.propagate = parent.l.propagate

    def make_logger(self, level='INFO', log_file=None, log_format=None):
        """
        로거 설정

        Args:
            level: 로그 레벨 이름 (CRITICAL, ERROR, WARNING, INFO, DEBUG, NOTSET)
            log_file: 로그 파일 경로 (None이면 콘솔만 사용)
            log_format: 로그 포맷 (None이면 기본 포맷)

        Raises:
            ValueError: 알 수 없는 로그 레벨
        """
        level_name = str(level).upper()
        if level_name not in Component._log_levels:
            raise ValueError(f'Unknown log level: {level}')

        formatter = logging.Formatter(log_format or Component._default_log_format)
        if not self.handlers:
            # 같은 이름으로 이전에 만든 핸들러 제거 및 닫기
            for old in list(self.l.handlers):
                self.l.removeHandler(old)
                old.close()
            sh = logging.StreamHandler()
            sh.setFormatter(formatter)
            self.handlers.append(sh)
            if log_file is not None:
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setFormatter(formatter)
                self.handlers.append(fh)
            for handler in self.handlers:
                self.l.addHandler(handler)

        self.l.setLevel(Component._log_levels[level_name])
        self.l.propagate = False

    def __repr__(self):
        """
        컴포넌트 문자열 표현

        Returns:
            str: 컴포넌트 경로 문자열 (예: "<Checker>/<Config>")
        """
        cls = self.__class__.__name__
        short_name = self._short_name
        if short_name == cls:
            display_name = f'<{cls}>'
        else:
            display_name = f'<{cls}:{short_name}>'

        if self._parent is None:
            return display_name
        else:
            return '%s/%s' % (self._parent, display_name)
