import sys, os
import logging
import traceback

if "HOSTMAC_DEBUG" in os.environ:
    logging.basicConfig(
        filename='program.log',
        level=logging.DEBUG,
        format='[%(asctime)s.%(msecs)03d] @ [%(filename)s:%(lineno)d] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    def log(m):
        if "HOSTMAC_DEBUG" not in os.environ:
            return

        logging.info(m)
else:
    log = lambda m: 1

# Warnings are always shown. Debug logs depend on the env var.
logger = logging.getLogger("hostmac")

def warn(m):
    logger.warning(m)
    log(f"warn: {m}")

# Command output as text.
to_s = lambda x: x if type(x) == str else x.decode("utf-8", "replace")

def log_exception():
    exc_type, exc_obj, exc_tb = sys.exc_info()
    fname = os.path.split(exc_tb.tb_frame.f_code.co_filename)[1]
    exc_out = traceback.format_exc()
    log("> {}, line {} = {}".format(
        fname,
        exc_tb.tb_lineno,
        exc_out
    ))
