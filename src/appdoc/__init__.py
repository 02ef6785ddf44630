from .conf import defaults

__version__ = "0.1.0"
__all__ = ('config', 'logger', 'setupModule')


def setupModule(module_name, *upstreams):
    ''' Config and logger of a module: values of the `[module_name]` config
        section first, then `upstreams` in order, then system defaults.
    '''
    from appdoc.conf import getConfig
    from appdoc.logs import getLogger

    config = getConfig(module_name, *upstreams)
    return config, getLogger(module_name, config)


config, logger = setupModule(__name__, defaults)
