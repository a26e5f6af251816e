from .resolver import get_macaddress

# Prints the primary MAC or nothing if there isn't one.
def main():
    mac = get_macaddress()
    if mac is not None:
        print(mac)

if __name__ == "__main__":
    main()
