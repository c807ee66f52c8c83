import asyncio
import logging
import typing

from kubernetes_asyncio import client, config

logger = logging.getLogger(__name__)

# Global lock to prevent race conditions during config loading
_CONFIG_LOCK = asyncio.Lock()
_CONFIG_LOADED = False


async def ensure_k8s_config(config_file: typing.Optional[str] = None, context: typing.Optional[str] = None) -> bool:
    """
    Ensures that the Kubernetes configuration is loaded exactly once.

    In-cluster configuration is tried first unless an explicit kubeconfig file
    or context was requested, in which case only the kubeconfig is used.

    Returns:
        bool: True if config was loaded successfully (or was already loaded), False otherwise.
    """
    global _CONFIG_LOADED

    if _CONFIG_LOADED:
        return True

    async with _CONFIG_LOCK:
        # Double-check locking pattern
        if _CONFIG_LOADED:
            return True

        if not config_file and not context:
            try:
                logger.debug("Attempting to load in-cluster Kubernetes config...")
                config.load_incluster_config()
                logger.info("Loaded in-cluster Kubernetes configuration.")
                _CONFIG_LOADED = True
                return True
            except config.ConfigException:
                logger.debug("In-cluster config not found.")
            except Exception as e:
                logger.warning(f"Unexpected error loading in-cluster config: {e}")

        try:
            logger.debug("Attempting to load kubeconfig (file=%s, context=%s)...", config_file, context)
            await config.load_kube_config(config_file=config_file, context=context)
            logger.info("Loaded Kubernetes configuration from kubeconfig file.")
            _CONFIG_LOADED = True
            return True
        except config.ConfigException as e:
            logger.warning(f"Could not load kubeconfig: {e}")
        except Exception as e:
            logger.warning(f"Unexpected error loading kubeconfig: {e}")

    logger.warning("Failed to load any Kubernetes configuration.")
    return False


async def get_core_v1_api(
    config_file: typing.Optional[str] = None, context: typing.Optional[str] = None
) -> typing.Optional[client.CoreV1Api]:
    """
    Returns a configured CoreV1Api instance.
    Safe to call concurrently.
    """
    if await ensure_k8s_config(config_file, context):
        return client.CoreV1Api()
    return None


async def get_custom_objects_api(
    config_file: typing.Optional[str] = None, context: typing.Optional[str] = None
) -> typing.Optional[client.CustomObjectsApi]:
    """
    Returns a configured CustomObjectsApi instance, used to read metrics.k8s.io.
    Safe to call concurrently.
    """
    if await ensure_k8s_config(config_file, context):
        return client.CustomObjectsApi()
    return None
